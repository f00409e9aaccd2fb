import pytest
from datetime import date, datetime, timedelta
from types import SimpleNamespace
from apps.inventory.models import ShelvingActionType
from apps.inventory.services.stock_calculation import (
    calculate_storage_quantity,
    calculate_shelf_quantity,
    calculate_average_shelved_per_week,
    get_earliest_best_before_in_storage,
    get_earliest_best_before_on_shelf,
)


START = datetime(2024, 1, 1, 12, 0)


def act(action_type, quantity, days=0):
    return SimpleNamespace(
        action_type=action_type,
        quantity=quantity,
        action_at=START + timedelta(days=days),
    )


def batch(best_before, *actions):
    return SimpleNamespace(best_before_date=best_before, shelving_actions=list(actions))


# =============================================================================
# Storage / Shelf Quantities
# =============================================================================

class TestStorageQuantity:

    def test_empty_is_zero(self):
        assert calculate_storage_quantity([]) == 0

    def test_add_then_move_to_shelf(self):
        actions = [
            act(ShelvingActionType.ADDED_TO_STORAGE, 10),
            act(ShelvingActionType.MOVED_TO_SHELF, 4),
        ]
        assert calculate_storage_quantity(actions) == 6

    def test_moved_back_from_shelf_returns_to_storage(self):
        actions = [
            act(ShelvingActionType.ADDED_TO_STORAGE, 10),
            act(ShelvingActionType.MOVED_TO_SHELF, 4),
            act(ShelvingActionType.MOVED_FROM_SHELF, 1),
            act(ShelvingActionType.REMOVED_FROM_STORAGE, 2),
        ]
        assert calculate_storage_quantity(actions) == 5

    def test_shelf_only_movements_do_not_touch_storage(self):
        actions = [
            act(ShelvingActionType.ADDED_TO_SHELF, 5),
            act(ShelvingActionType.CONSUMED, 2),
            act(ShelvingActionType.REMOVED_FROM_SHELF, 1),
        ]
        assert calculate_storage_quantity(actions) == 0


class TestShelfQuantity:

    def test_empty_is_zero(self):
        assert calculate_shelf_quantity([]) == 0

    def test_moved_to_shelf_minus_outbound(self):
        actions = [
            act(ShelvingActionType.ADDED_TO_STORAGE, 10),
            act(ShelvingActionType.MOVED_TO_SHELF, 4),
            act(ShelvingActionType.MOVED_FROM_SHELF, 1),
            act(ShelvingActionType.REMOVED_FROM_SHELF, 1),
        ]
        assert calculate_shelf_quantity(actions) == 2

    def test_added_directly_and_consumed(self):
        actions = [
            act(ShelvingActionType.ADDED_TO_SHELF, 6),
            act(ShelvingActionType.CONSUMED, 4),
        ]
        assert calculate_shelf_quantity(actions) == 2


# =============================================================================
# Best-before Lookups
# =============================================================================

class TestEarliestBestBefore:

    def test_none_without_batches(self):
        assert get_earliest_best_before_in_storage([]) is None
        assert get_earliest_best_before_on_shelf([]) is None

    def test_ignores_batches_without_stock(self):
        empty = batch(
            date(2024, 2, 1),
            act(ShelvingActionType.ADDED_TO_STORAGE, 3),
            act(ShelvingActionType.REMOVED_FROM_STORAGE, 3),
        )
        stocked = batch(date(2024, 3, 1), act(ShelvingActionType.ADDED_TO_STORAGE, 3))

        assert get_earliest_best_before_in_storage([empty, stocked]) == date(2024, 3, 1)

    def test_storage_and_shelf_are_independent(self):
        in_storage = batch(date(2024, 2, 1), act(ShelvingActionType.ADDED_TO_STORAGE, 3))
        on_shelf = batch(date(2024, 4, 1), act(ShelvingActionType.ADDED_TO_SHELF, 3))

        batches = [in_storage, on_shelf]
        assert get_earliest_best_before_in_storage(batches) == date(2024, 2, 1)
        assert get_earliest_best_before_on_shelf(batches) == date(2024, 4, 1)

    def test_picks_minimum_date(self):
        later = batch(date(2024, 5, 1), act(ShelvingActionType.MOVED_TO_SHELF, 1))
        sooner = batch(date(2024, 4, 1), act(ShelvingActionType.MOVED_TO_SHELF, 1))

        assert get_earliest_best_before_on_shelf([later, sooner]) == date(2024, 4, 1)


# =============================================================================
# Weekly Shelving Average
# =============================================================================

class TestAverageShelvedPerWeek:

    def test_zero_without_shelving(self):
        only_storage = batch(date(2024, 2, 1), act(ShelvingActionType.ADDED_TO_STORAGE, 10))
        assert calculate_average_shelved_per_week([]) == 0.0
        assert calculate_average_shelved_per_week([only_storage]) == 0.0

    def test_span_under_a_week_counts_as_one_week(self):
        b = batch(
            date(2024, 2, 1),
            act(ShelvingActionType.MOVED_TO_SHELF, 4, days=0),
            act(ShelvingActionType.ADDED_TO_SHELF, 3, days=3),
        )
        assert calculate_average_shelved_per_week([b]) == pytest.approx(7.0)

    def test_divides_by_span_in_weeks(self):
        first = batch(date(2024, 2, 1), act(ShelvingActionType.MOVED_TO_SHELF, 10, days=0))
        second = batch(date(2024, 3, 1), act(ShelvingActionType.MOVED_TO_SHELF, 18, days=14))

        assert calculate_average_shelved_per_week([first, second]) == pytest.approx(14.0)

    def test_outbound_movements_ignored(self):
        b = batch(
            date(2024, 2, 1),
            act(ShelvingActionType.MOVED_TO_SHELF, 5, days=0),
            act(ShelvingActionType.CONSUMED, 5, days=30),
        )
        assert calculate_average_shelved_per_week([b]) == pytest.approx(5.0)
