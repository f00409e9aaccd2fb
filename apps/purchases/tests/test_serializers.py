import pytest
from datetime import date, timedelta
from decimal import Decimal
from apps.inventory.models import Product
from apps.purchases.serializers import (
    PaymentFilterSerializer,
    PurchaseFilterSerializer,
    ScanInputSerializer,
)


# =============================================================================
# PurchaseFilterSerializer Tests
# =============================================================================

class TestPurchaseFilterSerializer:
    """Tests for PurchaseFilterSerializer input validation."""

    def test_empty_params(self):
        serializer = PurchaseFilterSerializer(data={})

        assert serializer.is_valid()
        assert serializer.validated_data['completed'] is None

    def test_completed_flag(self):
        serializer = PurchaseFilterSerializer(data={'completed': 'true'})

        assert serializer.is_valid()
        assert serializer.validated_data['completed'] is True

    def test_invalid_date_range(self):
        """End date before start date is rejected."""
        today = date.today()
        serializer = PurchaseFilterSerializer(data={
            'date_from': str(today),
            'date_to': str(today - timedelta(days=1)),
        })

        assert not serializer.is_valid()
        assert 'date_to' in serializer.errors


# =============================================================================
# ScanInputSerializer Tests
# =============================================================================

class TestScanInputSerializer:

    def test_amount_required(self):
        serializer = ScanInputSerializer(data={})

        assert not serializer.is_valid()
        assert 'amount' in serializer.errors

    def test_product_optional(self):
        serializer = ScanInputSerializer(data={'amount': '1.25'})

        assert serializer.is_valid()
        assert serializer.validated_data.get('product') is None

    @pytest.mark.django_db
    def test_product_resolves_to_instance(self):
        product = Product.objects.create(name='Crisps', barcode='123', price=Decimal('1.00'))
        serializer = ScanInputSerializer(data={'amount': '1.00', 'product': product.id})

        assert serializer.is_valid()
        assert serializer.validated_data['product'] == product

    @pytest.mark.django_db
    def test_unknown_product_invalid(self):
        serializer = ScanInputSerializer(data={'amount': '1.00', 'product': 999999})

        assert not serializer.is_valid()
        assert 'product' in serializer.errors


# =============================================================================
# PaymentFilterSerializer Tests
# =============================================================================

class TestPaymentFilterSerializer:

    def test_empty_params(self):
        serializer = PaymentFilterSerializer(data={})

        assert serializer.is_valid()
        assert serializer.validated_data.get('user') is None

    def test_numeric_user(self):
        serializer = PaymentFilterSerializer(data={'user': '42'})

        assert serializer.is_valid()
        assert serializer.validated_data['user'] == 42

    def test_non_numeric_user(self):
        serializer = PaymentFilterSerializer(data={'user': 'abc'})

        assert not serializer.is_valid()
        assert 'user' in serializer.errors
