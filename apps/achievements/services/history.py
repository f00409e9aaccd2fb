"""
History queries used by the evaluation engine.

Each function returns the narrow shape one rule needs. Dates are UTC
calendar dates.
"""

from datetime import date, datetime, time, timedelta, timezone as dt_timezone
from decimal import Decimal
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Set, Tuple

from django.db import DatabaseError
from django.db.models import Sum
from django.db.models.functions import TruncDate
from django.utils import timezone

from apps.achievements.models import Achievement, UserAchievement
from apps.purchases.models import Payment, Purchase, Scan

from .exceptions import AchievementPersistenceError


def _utc_midnight(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=dt_timezone.utc)


def get_purchase_with_scans(*, purchase_id: int) -> Optional[Purchase]:
    return (
        Purchase.objects
        .prefetch_related('scans')
        .filter(id=purchase_id)
        .first()
    )


def get_earned_codes_for_user(*, user_id: int) -> Set[str]:
    return set(
        UserAchievement.objects
        .filter(user_id=user_id)
        .values_list('achievement__code', flat=True)
    )


def get_achievement_catalog() -> Mapping[str, Achievement]:
    """Read-only mapping of code -> Achievement."""
    return MappingProxyType({a.code: a for a in Achievement.objects.all()})


def get_distinct_completion_dates(*, user_id: int, up_to: datetime) -> List[date]:
    """Distinct completion dates at or before ``up_to``, newest first."""
    return list(
        Purchase.objects
        .filter(user_id=user_id, completed_at__isnull=False, completed_at__lte=up_to)
        .annotate(day=TruncDate('completed_at', tzinfo=dt_timezone.utc))
        .order_by('-day')
        .values_list('day', flat=True)
        .distinct()
    )


def get_previous_completed_purchase(*, user_id: int, before: datetime) -> Optional[Purchase]:
    """Most recent purchase completed strictly before ``before``."""
    return (
        Purchase.objects
        .filter(user_id=user_id, completed_at__lt=before)
        .order_by('-completed_at')
        .first()
    )


def get_total_scanned(*, user_id: int) -> Decimal:
    """Sum of all scans, open purchases included."""
    total = Scan.objects.filter(
        purchase__user_id=user_id
    ).aggregate(total=Sum('amount'))['total']
    return total or Decimal('0.00')


def get_total_paid(*, user_id: int) -> Decimal:
    total = Payment.objects.filter(
        user_id=user_id
    ).aggregate(total=Sum('amount'))['total']
    return total or Decimal('0.00')


def get_purchase_count_on_date(*, user_id: int, day: date) -> int:
    """Purchases completed within ``[day 00:00, next day 00:00)`` UTC."""
    start = _utc_midnight(day)
    return Purchase.objects.filter(
        user_id=user_id,
        completed_at__gte=start,
        completed_at__lt=start + timedelta(days=1),
    ).count()


def get_completion_dates_in_range(*, user_id: int, start: date, end: date) -> Set[date]:
    """Distinct completion dates within ``[start, end)``."""
    return set(
        Purchase.objects
        .filter(
            user_id=user_id,
            completed_at__gte=_utc_midnight(start),
            completed_at__lt=_utc_midnight(end),
        )
        .annotate(day=TruncDate('completed_at', tzinfo=dt_timezone.utc))
        .order_by()
        .values_list('day', flat=True)
        .distinct()
    )


def persist_earned_achievements(
    *,
    user_id: int,
    awards: Iterable[Tuple[Achievement, Optional[Decimal]]]
) -> List[UserAchievement]:
    """
    Write all earned records in a single batch.

    Args:
        user_id: Earning user
        awards: ``(achievement, debt_at_earning)`` pairs

    Raises:
        AchievementPersistenceError: If the batch write fails
    """
    earned_at = timezone.now()
    records = [
        UserAchievement(
            user_id=user_id,
            achievement=achievement,
            earned_at=earned_at,
            shown=False,
            debt_at_earning=debt,
        )
        for achievement, debt in awards
    ]
    try:
        return UserAchievement.objects.bulk_create(records)
    except DatabaseError as e:
        raise AchievementPersistenceError(
            f"Failed to save {len(records)} achievement(s) for user {user_id}"
        ) from e
