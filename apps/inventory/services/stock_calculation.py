"""
Stock calculation service - derive stock levels from shelving actions.

Nothing here touches the database. Every function accepts plain iterables of
shelving actions (anything with ``action_type``, ``quantity`` and
``action_at``) or of batches (anything with ``best_before_date`` and a
``shelving_actions`` collection or related manager), so the same arithmetic
serves prefetched querysets and in-memory objects alike.

Storage side:
    + added_to_storage, moved_from_shelf
    - moved_to_shelf, removed_from_storage

Shelf side:
    + moved_to_shelf, added_to_shelf
    - moved_from_shelf, removed_from_shelf, consumed
"""

from datetime import date
from typing import Iterable, Optional

from apps.inventory.models import ShelvingActionType


STORAGE_INBOUND = frozenset({
    ShelvingActionType.ADDED_TO_STORAGE,
    ShelvingActionType.MOVED_FROM_SHELF,
})
STORAGE_OUTBOUND = frozenset({
    ShelvingActionType.MOVED_TO_SHELF,
    ShelvingActionType.REMOVED_FROM_STORAGE,
})
SHELF_INBOUND = frozenset({
    ShelvingActionType.MOVED_TO_SHELF,
    ShelvingActionType.ADDED_TO_SHELF,
})
SHELF_OUTBOUND = frozenset({
    ShelvingActionType.MOVED_FROM_SHELF,
    ShelvingActionType.REMOVED_FROM_SHELF,
    ShelvingActionType.CONSUMED,
})

DAYS_PER_WEEK = 7.0


def _actions_of(batch) -> Iterable:
    actions = batch.shelving_actions
    return actions.all() if hasattr(actions, 'all') else actions


def _net_quantity(actions: Iterable, inbound: frozenset, outbound: frozenset) -> int:
    total = 0
    for action in actions:
        if action.action_type in inbound:
            total += action.quantity
        elif action.action_type in outbound:
            total -= action.quantity
    return total


def calculate_storage_quantity(actions: Iterable) -> int:
    """Units currently held in storage (back room) for the given actions."""
    return _net_quantity(actions, STORAGE_INBOUND, STORAGE_OUTBOUND)


def calculate_shelf_quantity(actions: Iterable) -> int:
    """Units currently on the shelf for the given actions."""
    return _net_quantity(actions, SHELF_INBOUND, SHELF_OUTBOUND)


def calculate_average_shelved_per_week(batches: Iterable) -> float:
    """
    Average number of units put on the shelf per week.

    Only shelf-adding movements count. The time span runs from the first to
    the last such movement; spans shorter than a week count as one week so a
    burst of same-day restocking doesn't produce an inflated rate.

    Returns:
        0.0 when no shelf-adding movement exists.
    """
    shelved = [
        action
        for batch in batches
        for action in _actions_of(batch)
        if action.action_type in SHELF_INBOUND
    ]
    if not shelved:
        return 0.0

    first = min(action.action_at for action in shelved)
    last = max(action.action_at for action in shelved)
    span_days = (last - first).total_seconds() / 86400

    weeks = 1.0 if span_days < DAYS_PER_WEEK else span_days / DAYS_PER_WEEK
    total_quantity = sum(action.quantity for action in shelved)

    return total_quantity / weeks


def _earliest_best_before(batches: Iterable, quantity_of) -> Optional[date]:
    in_stock = [
        batch.best_before_date
        for batch in batches
        if quantity_of(_actions_of(batch)) > 0
    ]
    return min(in_stock) if in_stock else None


def get_earliest_best_before_in_storage(batches: Iterable) -> Optional[date]:
    """Earliest best-before date among batches with units left in storage."""
    return _earliest_best_before(batches, calculate_storage_quantity)


def get_earliest_best_before_on_shelf(batches: Iterable) -> Optional[date]:
    """Earliest best-before date among batches with units left on the shelf."""
    return _earliest_best_before(batches, calculate_shelf_quantity)
