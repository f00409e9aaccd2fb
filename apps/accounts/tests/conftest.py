import pytest
from decimal import Decimal
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.purchases.models import Payment, Purchase, Scan


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """A regular snackbox customer."""
    return User.objects.create_user(
        username='snacker',
        email='snacker@example.com',
        password='TestPass123!',
    )


@pytest.fixture
def user_inactive(db):
    return User.objects.create_user(
        username='gone',
        email='gone@example.com',
        password='TestPass123!',
        is_active=False,
    )


@pytest.fixture
def staff_user(db):
    """Staff member who records payments."""
    return User.objects.create_user(
        username='cashier',
        email='cashier@example.com',
        password='TestPass123!',
        is_staff=True,
    )


@pytest.fixture
def user_in_debt(user, staff_user):
    """
    User with 4.50 EUR of scans and a 2.00 EUR payment, so owes 2.50 EUR.
    """
    purchase = Purchase.objects.create(user=user)
    Scan.objects.create(purchase=purchase, amount=Decimal('3.00'))
    Scan.objects.create(purchase=purchase, amount=Decimal('1.50'))
    Payment.objects.create(user=user, amount=Decimal('2.00'), recorded_by=staff_user)
    return user


def _client_for(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def authenticated_client(user):
    return _client_for(user)


@pytest.fixture
def staff_client(staff_user):
    return _client_for(staff_user)
