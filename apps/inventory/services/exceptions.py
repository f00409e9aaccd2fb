"""Domain exceptions for inventory app."""


class InventoryServiceError(Exception):
    """Base exception for all inventory service errors."""
    pass


class ProductNotFoundError(InventoryServiceError):
    """Product does not exist."""
    pass


class BatchNotFoundError(InventoryServiceError):
    """Product batch does not exist."""
    pass


class InsufficientStockError(InventoryServiceError):
    """Movement would take storage or shelf stock below zero."""
    pass
