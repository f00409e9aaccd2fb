"""
Achievement evaluation engine.

Runs when a purchase completes (and, for a subset of rules, while it is
still being scanned). Each rule turns the user's history into a measure,
compares it against its tier table and awards every reached tier the user
doesn't hold yet. A code is awarded at most once per user.

Evaluations for one user are serialized by locking the user row, and all
earned records are written in one batch at the end.
"""

import logging
from datetime import datetime, timezone as dt_timezone
from decimal import Decimal
from typing import List, Optional

from django.conf import settings
from django.contrib.auth import get_user_model
from django.db import transaction

from apps.achievements import rules
from apps.achievements.models import Achievement

from . import history

logger = logging.getLogger(__name__)

User = get_user_model()


def _utc_date(moment: datetime):
    return moment.astimezone(dt_timezone.utc).date()


class _Evaluation:
    """State shared by all rule checks of one evaluation run."""

    def __init__(self, *, user_id, purchase, held_codes, catalog, policy):
        self.user_id = user_id
        self.purchase = purchase
        self.held_codes = held_codes
        self.catalog = catalog
        self.policy = policy
        self.awards = []
        self._total_scanned = None

    @property
    def total_scanned(self) -> Decimal:
        if self._total_scanned is None:
            self._total_scanned = history.get_total_scanned(user_id=self.user_id)
        return self._total_scanned

    def award(self, codes, debt_at_earning=None):
        for code in codes:
            if code in self.held_codes:
                continue
            achievement = self.catalog.get(code)
            if achievement is None:
                logger.warning("Achievement %s is not in the catalog, skipping", code)
                continue
            self.held_codes.add(code)
            self.awards.append((achievement, debt_at_earning))


# =============================================================================
# Rule Checks
# =============================================================================

def _check_single_purchase(ev: _Evaluation) -> None:
    amount = sum((scan.amount for scan in ev.purchase.scans.all()), Decimal('0.00'))
    ev.award(rules.single_purchase_codes(amount, ev.policy))


def _check_daily_count(ev: _Evaluation) -> None:
    count = history.get_purchase_count_on_date(
        user_id=ev.user_id,
        day=_utc_date(ev.purchase.completed_at),
    )
    ev.award(rules.met_tiers(count, rules.DAILY_COUNT_TIERS))


def _check_daily_streak(ev: _Evaluation) -> None:
    dates = history.get_distinct_completion_dates(
        user_id=ev.user_id,
        up_to=ev.purchase.completed_at,
    )
    streak = rules.daily_streak_length(dates)
    ev.award(rules.met_tiers(streak, rules.DAILY_STREAK_TIERS))


def _check_weekly_streak(ev: _Evaluation) -> None:
    day = _utc_date(ev.purchase.completed_at)
    windows = rules.weekly_streak_windows(day)
    dates = history.get_completion_dates_in_range(
        user_id=ev.user_id,
        start=windows[0][0],
        end=windows[-1][1],
    )
    if rules.has_weekly_streak(day, dates):
        ev.award([rules.WEEKLY_STREAK_CODE])


def _check_comeback(ev: _Evaluation) -> None:
    previous = history.get_previous_completed_purchase(
        user_id=ev.user_id,
        before=ev.purchase.completed_at,
    )
    if previous is None:
        return
    days = rules.days_between(previous.completed_at, ev.purchase.completed_at)
    ev.award(rules.met_tiers(days, rules.COMEBACK_TIERS))


def _check_high_debt(ev: _Evaluation) -> None:
    debt = ev.total_scanned - history.get_total_paid(user_id=ev.user_id)
    ev.award(rules.met_tiers(debt, rules.HIGH_DEBT_TIERS), debt_at_earning=debt)


def _check_total_spent(ev: _Evaluation) -> None:
    ev.award(rules.met_tiers(ev.total_scanned, rules.TOTAL_SPENT_TIERS))


COMPLETION_CHECKS = (
    _check_single_purchase,
    _check_daily_count,
    _check_daily_streak,
    _check_weekly_streak,
    _check_comeback,
    _check_high_debt,
    _check_total_spent,
)

# Rules that don't depend on the completion timestamp
IMMEDIATE_CHECKS = (
    _check_single_purchase,
    _check_high_debt,
    _check_total_spent,
)


# =============================================================================
# Entry Points
# =============================================================================

def _resolve_policy(policy: Optional[str]) -> str:
    policy = policy or getattr(
        settings, 'ACHIEVEMENT_SINGLE_PURCHASE_POLICY', rules.CUMULATIVE
    )
    if policy not in rules.SINGLE_PURCHASE_POLICIES:
        raise ValueError(f"Unknown single purchase policy: {policy}")
    return policy


def _run(*, user_id: int, purchase, checks, policy: str) -> List[Achievement]:
    with transaction.atomic():
        # Serializes concurrent evaluations for the same user
        if User.objects.select_for_update().filter(id=user_id).first() is None:
            return []

        ev = _Evaluation(
            user_id=user_id,
            purchase=purchase,
            held_codes=history.get_earned_codes_for_user(user_id=user_id),
            catalog=history.get_achievement_catalog(),
            policy=policy,
        )
        for check in checks:
            check(ev)

        if ev.awards:
            history.persist_earned_achievements(user_id=user_id, awards=ev.awards)

    earned = [achievement for achievement, _ in ev.awards]
    if earned:
        logger.info(
            "User %s earned %s for purchase %s",
            user_id, ', '.join(a.code for a in earned), purchase.id
        )
    return earned


def evaluate_purchase(
    *,
    user_id: int,
    purchase_id: int,
    single_purchase_policy: Optional[str] = None
) -> List[Achievement]:
    """
    Evaluate all achievement rules for a completed purchase.

    Args:
        user_id: Purchase owner
        purchase_id: The purchase that was just completed
        single_purchase_policy: 'cumulative' or 'exclusive'
            (defaults to settings.ACHIEVEMENT_SINGLE_PURCHASE_POLICY)

    Returns:
        Newly earned achievements in rule order. Empty when the purchase
        doesn't exist, belongs to someone else or isn't completed.

    Raises:
        AchievementPersistenceError: If earned records can't be saved
    """
    policy = _resolve_policy(single_purchase_policy)

    purchase = history.get_purchase_with_scans(purchase_id=purchase_id)
    if purchase is None or purchase.user_id != user_id or purchase.completed_at is None:
        return []

    return _run(user_id=user_id, purchase=purchase, checks=COMPLETION_CHECKS, policy=policy)


def evaluate_open_purchase(
    *,
    user_id: int,
    purchase_id: int,
    single_purchase_policy: Optional[str] = None
) -> List[Achievement]:
    """
    Evaluate the amount-based rules (single purchase, debt, total spent)
    for a purchase that may still be open.

    Lets the scanner show badges before checkout. Whatever is awarded here
    is not awarded again when the purchase completes.
    """
    policy = _resolve_policy(single_purchase_policy)

    purchase = history.get_purchase_with_scans(purchase_id=purchase_id)
    if purchase is None or purchase.user_id != user_id:
        return []

    return _run(user_id=user_id, purchase=purchase, checks=IMMEDIATE_CHECKS, policy=policy)
