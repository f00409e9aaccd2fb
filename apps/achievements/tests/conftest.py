import pytest
from datetime import datetime, timezone as dt_timezone
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.achievements.models import Achievement, UserAchievement
from apps.purchases.models import Purchase, Scan


# Fixed "now" so day boundaries and windows are predictable (a Saturday)
NOW = datetime(2024, 6, 15, 12, 0, tzinfo=dt_timezone.utc)


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a test user."""
    return User.objects.create_user(
        email='snacker@example.com',
        password='TestPass123!',
        username='snacker',
    )


@pytest.fixture
def other_user(db):
    return User.objects.create_user(
        email='other@example.com',
        password='TestPass123!',
        username='other',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Return an authenticated API client using JWT."""
    refresh = RefreshToken.for_user(user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def make_purchase(user):
    """
    Factory for a purchase with a single scan.

    Pass ``completed_at=None`` for an open purchase.
    """
    def _make(amount='1.00', completed_at=NOW, owner=None):
        purchase = Purchase.objects.create(user=owner or user, completed_at=completed_at)
        Scan.objects.create(purchase=purchase, amount=Decimal(amount))
        return purchase
    return _make


@pytest.fixture
def earn(user):
    """Factory that gives the user an earned record for a catalog code."""
    def _earn(code, shown=False):
        return UserAchievement.objects.create(
            user=user,
            achievement=Achievement.objects.get(code=code),
            shown=shown,
        )
    return _earn
