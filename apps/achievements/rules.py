"""
Achievement rules - tier tables and the pure measures behind them.

Each tier table is an ascending sequence of ``(threshold, code)`` pairs. The
evaluation engine computes a measure from the user's history and awards the
codes whose threshold is met. Nothing in this module touches the database.
"""

from datetime import date, datetime, timedelta
from decimal import Decimal
from typing import Iterable, List, Sequence, Tuple

from apps.achievements.models import AchievementCategory


CUMULATIVE = 'cumulative'
EXCLUSIVE = 'exclusive'
SINGLE_PURCHASE_POLICIES = (CUMULATIVE, EXCLUSIVE)


SINGLE_PURCHASE_TIERS = (
    (Decimal('2'), 'BIG_SPENDER_2'),
    (Decimal('3'), 'BIG_SPENDER_3'),
    (Decimal('4'), 'BIG_SPENDER_4'),
    (Decimal('5'), 'BIG_SPENDER_5'),
    (Decimal('6'), 'BIG_SPENDER_6'),
)

DAILY_COUNT_TIERS = (
    (3, 'DAILY_BUYER_3'),
    (5, 'DAILY_BUYER_5'),
    (10, 'DAILY_BUYER_10'),
)

DAILY_STREAK_TIERS = (
    (3, 'STREAK_DAILY_3'),
    (7, 'STREAK_DAILY_7'),
    (14, 'STREAK_DAILY_14'),
    (30, 'STREAK_DAILY_30'),
)

WEEKLY_STREAK_WEEKS = 4
WEEKLY_STREAK_CODE = 'STREAK_WEEKLY_4'

COMEBACK_TIERS = (
    (30, 'COMEBACK_30'),
    (60, 'COMEBACK_60'),
    (90, 'COMEBACK_90'),
)

HIGH_DEBT_TIERS = (
    (Decimal('15'), 'IN_DEBT_15'),
    (Decimal('20'), 'IN_DEBT_20'),
    (Decimal('25'), 'IN_DEBT_25'),
    (Decimal('30'), 'IN_DEBT_30'),
    (Decimal('35'), 'IN_DEBT_35'),
)

TOTAL_SPENT_TIERS = (
    (Decimal('50'), 'TOTAL_SPENT_50'),
    (Decimal('100'), 'TOTAL_SPENT_100'),
    (Decimal('150'), 'TOTAL_SPENT_150'),
    (Decimal('200'), 'TOTAL_SPENT_200'),
    (Decimal('300'), 'TOTAL_SPENT_300'),
    (Decimal('500'), 'TOTAL_SPENT_500'),
)

# Every code the engine can award, by catalog category
TIER_TABLE = {
    AchievementCategory.SINGLE_PURCHASE: [code for _, code in SINGLE_PURCHASE_TIERS],
    AchievementCategory.DAILY_ACTIVITY: [code for _, code in DAILY_COUNT_TIERS],
    AchievementCategory.STREAK: (
        [code for _, code in DAILY_STREAK_TIERS] + [WEEKLY_STREAK_CODE]
    ),
    AchievementCategory.COMEBACK: [code for _, code in COMEBACK_TIERS],
    AchievementCategory.HIGH_DEBT: [code for _, code in HIGH_DEBT_TIERS],
    AchievementCategory.TOTAL_SPENT: [code for _, code in TOTAL_SPENT_TIERS],
}


def all_codes() -> List[str]:
    return [code for codes in TIER_TABLE.values() for code in codes]


def met_tiers(measure, tiers: Sequence[Tuple]) -> List[str]:
    """Codes of every tier whose threshold ``measure`` reaches, lowest first."""
    return [code for threshold, code in tiers if measure >= threshold]


def single_purchase_codes(amount: Decimal, policy: str = CUMULATIVE) -> List[str]:
    """
    Codes earned by a single purchase of ``amount``.

    ``cumulative`` returns every tier reached. ``exclusive`` returns only the
    highest tier reached, so a €6 purchase yields BIG_SPENDER_6 alone.
    """
    if policy not in SINGLE_PURCHASE_POLICIES:
        raise ValueError(f"Unknown single purchase policy: {policy}")

    codes = met_tiers(amount, SINGLE_PURCHASE_TIERS)
    if policy == EXCLUSIVE:
        return codes[-1:]
    return codes


def daily_streak_length(dates: Iterable[date]) -> int:
    """
    Length of the run of consecutive days ending at the most recent date.

    0 for no dates, 1 when the latest date has no predecessor the day before.
    """
    ordered = sorted(set(dates), reverse=True)
    if not ordered:
        return 0

    streak = 1
    anchor = ordered[0]
    for day in ordered[1:]:
        if day != anchor - timedelta(days=1):
            break
        streak += 1
        anchor = day
    return streak


def weekly_streak_windows(day: date) -> List[Tuple[date, date]]:
    """
    Half-open ``[start, end)`` week windows covering the four weeks before
    ``day``, oldest first. ``day`` itself falls outside every window.
    """
    start = day - timedelta(days=7 * WEEKLY_STREAK_WEEKS)
    return [
        (start + timedelta(days=7 * week), start + timedelta(days=7 * (week + 1)))
        for week in range(WEEKLY_STREAK_WEEKS)
    ]


def has_weekly_streak(day: date, dates: Iterable[date]) -> bool:
    """True when every weekly window before ``day`` holds a completion date."""
    dates = set(dates)
    return all(
        any(start <= d < end for d in dates)
        for start, end in weekly_streak_windows(day)
    )


def days_between(earlier: datetime, later: datetime) -> int:
    """Whole days elapsed from ``earlier`` to ``later``."""
    return (later - earlier).days
