"""
Purchases services - Business logic layer.

- Purchase lifecycle (open, scan, complete)
- Payments and balances
"""

from .purchase_management import (
    open_purchase,
    add_scan,
    complete_purchase,
    record_payment,
    get_user_balance,
)

from .exceptions import (
    PurchasesServiceError,
    PurchaseNotFoundError,
    PurchaseAlreadyCompletedError,
    EmptyPurchaseError,
    InvalidAmountError,
    UnknownProductError,
)

__all__ = [
    # Purchase Management
    'open_purchase',
    'add_scan',
    'complete_purchase',
    'record_payment',
    'get_user_balance',
    # Exceptions
    'PurchasesServiceError',
    'PurchaseNotFoundError',
    'PurchaseAlreadyCompletedError',
    'EmptyPurchaseError',
    'InvalidAmountError',
    'UnknownProductError',
]
