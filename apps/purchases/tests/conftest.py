import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.purchases.models import Purchase, Scan


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def buyer(db):
    """Create and return a user who buys snacks."""
    return User.objects.create_user(
        email='buyer@example.com',
        password='TestPass123!',
        username='buyer',
    )


@pytest.fixture
def other_user(db):
    """Create and return another user."""
    return User.objects.create_user(
        email='other@example.com',
        password='TestPass123!',
        username='other',
    )


@pytest.fixture
def staff_user(db):
    """Create and return a staff member."""
    return User.objects.create_user(
        email='staff@example.com',
        password='TestPass123!',
        username='staff',
        is_staff=True,
    )


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def buyer_client(buyer):
    """Return API client authenticated as buyer."""
    return _client_for(buyer)


@pytest.fixture
def other_client(other_user):
    """Return API client authenticated as another user."""
    return _client_for(other_user)


@pytest.fixture
def staff_client(staff_user):
    """Return API client authenticated as staff."""
    return _client_for(staff_user)


@pytest.fixture
def open_purchase(buyer):
    """Open purchase with one €1.50 scan."""
    purchase = Purchase.objects.create(user=buyer)
    Scan.objects.create(purchase=purchase, amount=Decimal('1.50'))
    return purchase


@pytest.fixture
def empty_purchase(buyer):
    """Open purchase without scans."""
    return Purchase.objects.create(user=buyer)
