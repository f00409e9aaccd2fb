"""Queries over achievements a user has already earned."""

from typing import Iterable, Optional

from django.db.models import QuerySet

from apps.achievements.models import UserAchievement


def get_user_achievements(*, user_id: int) -> QuerySet:
    """All earned records for a user, newest first."""
    return (
        UserAchievement.objects
        .select_related('achievement')
        .filter(user_id=user_id)
        .order_by('-earned_at')
    )


def get_unshown_achievements(*, user_id: int) -> QuerySet:
    """Earned records the user hasn't acknowledged yet."""
    return get_user_achievements(user_id=user_id).filter(shown=False)


def mark_achievements_shown(*, user_id: int, ids: Optional[Iterable[int]] = None) -> int:
    """
    Flag earned records as shown.

    Args:
        user_id: Owner of the records
        ids: Record IDs to flag; all unshown records when None

    Returns:
        Number of records updated
    """
    queryset = UserAchievement.objects.filter(user_id=user_id, shown=False)
    if ids is not None:
        queryset = queryset.filter(id__in=list(ids))
    return queryset.update(shown=True)
