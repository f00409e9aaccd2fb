"""
Inventory management service.

Records shelving movements and summarises stock per product. Stock levels
are always derived through the stock_calculation functions.
"""

import logging
from datetime import datetime
from typing import Optional

from django.db import transaction
from django.utils import timezone

from apps.inventory.models import Product, ProductBatch, ShelvingAction, ShelvingActionType

from .exceptions import BatchNotFoundError, InsufficientStockError, ProductNotFoundError
from .stock_calculation import (
    STORAGE_OUTBOUND,
    SHELF_OUTBOUND,
    calculate_average_shelved_per_week,
    calculate_shelf_quantity,
    calculate_storage_quantity,
    get_earliest_best_before_in_storage,
    get_earliest_best_before_on_shelf,
)

logger = logging.getLogger(__name__)


@transaction.atomic
def record_shelving_action(
    *,
    batch_id: int,
    action_type: str,
    quantity: int,
    action_at: Optional[datetime] = None
) -> ShelvingAction:
    """
    Record a stock movement for a batch.

    The batch row is locked so two concurrent movements can't both draw on
    the same units.

    Args:
        batch_id: ID of the product batch
        action_type: One of ShelvingActionType values
        quantity: Positive number of units moved
        action_at: Movement timestamp (defaults to now)

    Returns:
        Created ShelvingAction

    Raises:
        BatchNotFoundError: If batch doesn't exist
        InsufficientStockError: If storage or shelf would go negative
        ValueError: If quantity is not positive or type is unknown
    """
    if quantity <= 0:
        raise ValueError("Quantity must be positive")
    if action_type not in ShelvingActionType.values:
        raise ValueError(f"Unknown shelving action type: {action_type}")

    try:
        batch = ProductBatch.objects.select_for_update().get(id=batch_id)
    except ProductBatch.DoesNotExist:
        raise BatchNotFoundError(f"Batch with ID {batch_id} not found")

    actions = list(batch.shelving_actions.all())

    if action_type in STORAGE_OUTBOUND:
        available = calculate_storage_quantity(actions)
        if quantity > available:
            raise InsufficientStockError(
                f"Only {available} unit(s) in storage for batch {batch_id}"
            )
    if action_type in SHELF_OUTBOUND:
        available = calculate_shelf_quantity(actions)
        if quantity > available:
            raise InsufficientStockError(
                f"Only {available} unit(s) on shelf for batch {batch_id}"
            )

    action = ShelvingAction.objects.create(
        batch=batch,
        action_type=action_type,
        quantity=quantity,
        action_at=action_at or timezone.now(),
    )
    logger.info(
        "Recorded %s x%s for batch %s", action_type, quantity, batch_id
    )
    return action


def get_product_stock_summary(*, product_id: int) -> dict:
    """
    Summarise current stock for one product across all its batches.

    Returns:
        Dictionary with:
        - product: Product instance
        - storage_quantity: int
        - shelf_quantity: int
        - earliest_best_before_in_storage: date or None
        - earliest_best_before_on_shelf: date or None
        - average_shelved_per_week: float

    Raises:
        ProductNotFoundError: If product doesn't exist
    """
    try:
        product = Product.objects.get(id=product_id)
    except Product.DoesNotExist:
        raise ProductNotFoundError(f"Product with ID {product_id} not found")

    batches = list(product.batches.prefetch_related('shelving_actions'))

    storage = sum(calculate_storage_quantity(b.shelving_actions.all()) for b in batches)
    shelf = sum(calculate_shelf_quantity(b.shelving_actions.all()) for b in batches)

    return {
        'product': product,
        'storage_quantity': storage,
        'shelf_quantity': shelf,
        'earliest_best_before_in_storage': get_earliest_best_before_in_storage(batches),
        'earliest_best_before_on_shelf': get_earliest_best_before_on_shelf(batches),
        'average_shelved_per_week': round(calculate_average_shelved_per_week(batches), 2),
    }
