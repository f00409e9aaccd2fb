"""
Inventory services - Business logic layer.

- Stock calculation (pure arithmetic over shelving actions)
- Shelving movement recording and per-product stock summaries
"""

from .stock_calculation import (
    calculate_storage_quantity,
    calculate_shelf_quantity,
    calculate_average_shelved_per_week,
    get_earliest_best_before_in_storage,
    get_earliest_best_before_on_shelf,
)

from .inventory_management import (
    record_shelving_action,
    get_product_stock_summary,
)

from .exceptions import (
    InventoryServiceError,
    ProductNotFoundError,
    BatchNotFoundError,
    InsufficientStockError,
)

__all__ = [
    # Stock Calculation
    'calculate_storage_quantity',
    'calculate_shelf_quantity',
    'calculate_average_shelved_per_week',
    'get_earliest_best_before_in_storage',
    'get_earliest_best_before_on_shelf',
    # Inventory Management
    'record_shelving_action',
    'get_product_stock_summary',
    # Exceptions
    'InventoryServiceError',
    'ProductNotFoundError',
    'BatchNotFoundError',
    'InsufficientStockError',
]
