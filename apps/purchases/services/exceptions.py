"""Domain exceptions for purchases app."""


class PurchasesServiceError(Exception):
    """Base exception for all purchase service errors."""
    pass


class PurchaseNotFoundError(PurchasesServiceError):
    """Purchase does not exist or belongs to another user."""
    pass


class PurchaseAlreadyCompletedError(PurchasesServiceError):
    """Purchase is already completed and can't be changed."""
    pass


class EmptyPurchaseError(PurchasesServiceError):
    """Purchase has no scans and can't be completed."""
    pass


class InvalidAmountError(PurchasesServiceError):
    """Amount is zero or negative."""
    pass


class UnknownProductError(PurchasesServiceError):
    """Scanned product does not exist in the inventory."""
    pass
