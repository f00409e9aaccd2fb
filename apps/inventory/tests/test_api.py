import pytest
from datetime import date
from decimal import Decimal
from unittest.mock import patch
from django.urls import reverse
from rest_framework import status
from apps.inventory.models import Product, ProductBatch, ShelvingAction, ShelvingActionType
from apps.inventory.services import (
    record_shelving_action,
    get_product_stock_summary,
    BatchNotFoundError,
    InsufficientStockError,
    ProductNotFoundError,
)


# =============================================================================
# Service Tests
# =============================================================================

@pytest.mark.django_db
class TestRecordShelvingAction:

    def test_records_movement(self, batch):
        action = record_shelving_action(
            batch_id=batch.id,
            action_type=ShelvingActionType.MOVED_TO_SHELF,
            quantity=5,
        )

        assert action.pk is not None
        assert action.batch_id == batch.id
        assert action.action_at is not None

    def test_rejects_more_than_in_storage(self, batch):
        # 20 added, 8 moved to shelf => 12 in storage
        with pytest.raises(InsufficientStockError):
            record_shelving_action(
                batch_id=batch.id,
                action_type=ShelvingActionType.MOVED_TO_SHELF,
                quantity=13,
            )

    def test_rejects_more_than_on_shelf(self, batch):
        # 8 moved to shelf, 2 consumed => 6 on shelf
        with pytest.raises(InsufficientStockError):
            record_shelving_action(
                batch_id=batch.id,
                action_type=ShelvingActionType.CONSUMED,
                quantity=7,
            )

    def test_unknown_batch(self, db):
        with pytest.raises(BatchNotFoundError):
            record_shelving_action(
                batch_id=999999,
                action_type=ShelvingActionType.ADDED_TO_STORAGE,
                quantity=1,
            )

    def test_rejects_non_positive_quantity(self, batch):
        with pytest.raises(ValueError):
            record_shelving_action(
                batch_id=batch.id,
                action_type=ShelvingActionType.ADDED_TO_STORAGE,
                quantity=0,
            )


@pytest.mark.django_db
class TestProductStockSummary:

    def test_summary(self, product, batch):
        summary = get_product_stock_summary(product_id=product.id)

        assert summary['product'] == product
        assert summary['storage_quantity'] == 12
        assert summary['shelf_quantity'] == 6
        assert summary['earliest_best_before_in_storage'] == batch.best_before_date
        assert summary['earliest_best_before_on_shelf'] == batch.best_before_date
        assert summary['average_shelved_per_week'] == 8.0

    def test_unknown_product(self, db):
        with pytest.raises(ProductNotFoundError):
            get_product_stock_summary(product_id=999999)


# =============================================================================
# API Tests
# =============================================================================

@pytest.mark.django_db
class TestProductApi:

    def test_list_products(self, authenticated_client, product):
        url = reverse('inventory:product-list')
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert [p['barcode'] for p in response.data] == [product.barcode]

    def test_list_requires_auth(self, api_client):
        response = api_client.get(reverse('inventory:product-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_stock_summary(self, authenticated_client, product, batch):
        url = reverse('inventory:product-stock', kwargs={'pk': product.id})
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['storage_quantity'] == 12
        assert response.data['shelf_quantity'] == 6

    def test_stock_non_numeric_id_returns_404(self, authenticated_client, product):
        response = authenticated_client.get('/api/inventory/products/abc/stock/')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_stock_unknown_product_returns_404(self, authenticated_client, db):
        url = reverse('inventory:product-stock', kwargs={'pk': 999999})
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_stock_inactive_product_returns_404(self, authenticated_client, product):
        product.is_active = False
        product.save(update_fields=['is_active'])

        url = reverse('inventory:product-stock', kwargs={'pk': product.id})
        response = authenticated_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestBatchApi:

    def test_staff_sees_quantities(self, staff_client, batch):
        response = staff_client.get(reverse('inventory:batch-list'))

        assert response.status_code == status.HTTP_200_OK
        assert response.data[0]['storage_quantity'] == 12
        assert response.data[0]['shelf_quantity'] == 6

    def test_regular_user_forbidden(self, authenticated_client, batch):
        response = authenticated_client.get(reverse('inventory:batch-list'))

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_filter_by_product(self, staff_client, batch):
        other = Product.objects.create(
            name='Gummy Bears', barcode='4009876543210', price=Decimal('0.90')
        )
        ProductBatch.objects.create(product=other, best_before_date=date.today())

        url = reverse('inventory:batch-list')
        response = staff_client.get(url, {'product': batch.product_id})

        assert response.status_code == status.HTTP_200_OK
        assert [b['id'] for b in response.data] == [batch.id]

    def test_non_numeric_product_filter_returns_400(self, staff_client, batch):
        url = reverse('inventory:batch-list')
        response = staff_client.get(url, {'product': 'abc'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'product' in response.data

    def test_non_numeric_batch_id_returns_404(self, staff_client, batch):
        response = staff_client.get('/api/inventory/batches/abc/')

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestShelvingActionApi:

    def test_staff_records_action(self, staff_client, batch):
        url = reverse('inventory:shelving-action-create')
        response = staff_client.post(url, {
            'batch': batch.id,
            'action_type': ShelvingActionType.MOVED_TO_SHELF,
            'quantity': 2,
        }, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert ShelvingAction.objects.filter(batch=batch).count() == 4

    def test_insufficient_stock_returns_400(self, staff_client, batch):
        url = reverse('inventory:shelving-action-create')
        response = staff_client.post(url, {
            'batch': batch.id,
            'action_type': ShelvingActionType.REMOVED_FROM_SHELF,
            'quantity': 50,
        }, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_regular_user_forbidden(self, authenticated_client, batch):
        url = reverse('inventory:shelving-action-create')
        response = authenticated_client.post(url, {
            'batch': batch.id,
            'action_type': ShelvingActionType.ADDED_TO_STORAGE,
            'quantity': 2,
        }, format='json')

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_missing_batch_returns_404(self, staff_client, batch):
        url = reverse('inventory:shelving-action-create')
        with patch(
            'apps.inventory.views.record_shelving_action_service',
            side_effect=BatchNotFoundError('gone'),
        ):
            response = staff_client.post(url, {
                'batch': batch.id,
                'action_type': ShelvingActionType.ADDED_TO_STORAGE,
                'quantity': 1,
            }, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND
