"""
Purchase management service.

Opening purchases, scanning items, completing purchases and recording
payments. Balances are always derived from scans and payments, nothing is
cached on the user.
"""

import logging
from decimal import Decimal
from typing import Optional

from django.db import transaction
from django.db.models import Sum
from django.utils import timezone

from apps.inventory.models import Product
from apps.purchases.models import Payment, Purchase, Scan

from .exceptions import (
    EmptyPurchaseError,
    InvalidAmountError,
    PurchaseAlreadyCompletedError,
    PurchaseNotFoundError,
    UnknownProductError,
)

logger = logging.getLogger(__name__)


def _get_own_purchase(purchase_id: int, user, *, lock: bool = False) -> Purchase:
    queryset = Purchase.objects.all()
    if lock:
        queryset = queryset.select_for_update()
    try:
        return queryset.get(id=purchase_id, user=user)
    except Purchase.DoesNotExist:
        raise PurchaseNotFoundError(f"Purchase with ID {purchase_id} not found")


def open_purchase(*, user) -> Purchase:
    """Start a new, empty purchase for the user."""
    purchase = Purchase.objects.create(user=user)
    logger.debug("Opened purchase %s for user %s", purchase.id, user.id)
    return purchase


@transaction.atomic
def add_scan(
    *,
    purchase_id: int,
    user,
    amount: Decimal,
    product_id: Optional[int] = None
) -> Scan:
    """
    Add a scanned item to an open purchase.

    Args:
        purchase_id: ID of the purchase
        user: Owner of the purchase
        amount: Price charged for the item
        product_id: Optional inventory product the barcode resolved to

    Returns:
        Created Scan

    Raises:
        PurchaseNotFoundError: If purchase doesn't exist for this user
        PurchaseAlreadyCompletedError: If purchase is completed
        InvalidAmountError: If amount is not positive
        UnknownProductError: If product_id matches no product
    """
    if amount is None or Decimal(amount) <= 0:
        raise InvalidAmountError("Scan amount must be positive")

    purchase = _get_own_purchase(purchase_id, user, lock=True)
    if purchase.is_completed:
        raise PurchaseAlreadyCompletedError(
            f"Purchase {purchase_id} is already completed"
        )

    product = None
    if product_id is not None:
        product = Product.objects.filter(id=product_id).first()
        if product is None:
            raise UnknownProductError(f"Product with ID {product_id} not found")

    return Scan.objects.create(purchase=purchase, product=product, amount=amount)


@transaction.atomic
def complete_purchase(*, purchase_id: int, user) -> Purchase:
    """
    Mark a purchase as completed now.

    Raises:
        PurchaseNotFoundError: If purchase doesn't exist for this user
        PurchaseAlreadyCompletedError: If purchase is already completed
        EmptyPurchaseError: If purchase has no scans
    """
    purchase = _get_own_purchase(purchase_id, user, lock=True)

    if purchase.is_completed:
        raise PurchaseAlreadyCompletedError(
            f"Purchase {purchase_id} is already completed"
        )
    if not purchase.scans.exists():
        raise EmptyPurchaseError(f"Purchase {purchase_id} has no scans")

    purchase.completed_at = timezone.now()
    purchase.save(update_fields=['completed_at'])

    logger.info(
        "Completed purchase %s for user %s (%s EUR)",
        purchase.id, user.id, purchase.total_amount()
    )
    return purchase


def record_payment(
    *,
    user_id: int,
    amount: Decimal,
    notes: str = '',
    recorded_by=None
) -> Payment:
    """
    Record a payment towards a user's balance.

    Raises:
        InvalidAmountError: If amount is not positive
    """
    if amount is None or Decimal(amount) <= 0:
        raise InvalidAmountError("Payment amount must be positive")

    payment = Payment.objects.create(
        user_id=user_id,
        amount=amount,
        notes=notes,
        recorded_by=recorded_by,
    )
    logger.info("Recorded payment of %s EUR for user %s", amount, user_id)
    return payment


def get_user_balance(*, user_id: int) -> dict:
    """
    Calculate a user's running balance.

    Scans on open purchases count towards the balance too.

    Returns:
        Dictionary with:
        - total_spent: Decimal, sum of all scans
        - total_paid: Decimal, sum of all payments
        - debt: Decimal, total_spent - total_paid (negative means credit)
    """
    total_spent = Scan.objects.filter(
        purchase__user_id=user_id
    ).aggregate(total=Sum('amount'))['total'] or Decimal('0.00')

    total_paid = Payment.objects.filter(
        user_id=user_id
    ).aggregate(total=Sum('amount'))['total'] or Decimal('0.00')

    return {
        'total_spent': total_spent,
        'total_paid': total_paid,
        'debt': total_spent - total_paid,
    }
