import pytest
from datetime import date, timedelta
from decimal import Decimal
from django.utils import timezone
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.inventory.models import Product, ProductBatch, ShelvingAction, ShelvingActionType


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def user(db):
    """Create and return a regular user."""
    return User.objects.create_user(
        email='snacker@example.com',
        password='TestPass123!',
        username='snacker',
    )


@pytest.fixture
def staff_user(db):
    """Create and return a staff user."""
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
def authenticated_client(user):
    return _client_for(user)


@pytest.fixture
def staff_client(staff_user):
    return _client_for(staff_user)


@pytest.fixture
def product(db):
    """Create and return a product."""
    return Product.objects.create(
        name='Chocolate Bar',
        barcode='4001234567890',
        price=Decimal('1.20'),
    )


@pytest.fixture
def batch(product):
    """Batch with 20 units in storage, 8 moved to the shelf and 2 consumed."""
    batch = ProductBatch.objects.create(
        product=product,
        best_before_date=date.today() + timedelta(days=30),
    )
    now = timezone.now()
    ShelvingAction.objects.create(
        batch=batch, action_type=ShelvingActionType.ADDED_TO_STORAGE,
        quantity=20, action_at=now - timedelta(days=14),
    )
    ShelvingAction.objects.create(
        batch=batch, action_type=ShelvingActionType.MOVED_TO_SHELF,
        quantity=8, action_at=now - timedelta(days=14),
    )
    ShelvingAction.objects.create(
        batch=batch, action_type=ShelvingActionType.CONSUMED,
        quantity=2, action_at=now - timedelta(days=1),
    )
    return batch
