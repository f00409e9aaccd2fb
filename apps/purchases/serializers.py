from decimal import Decimal
from rest_framework import serializers
from .models import Purchase, Scan, Payment
from apps.accounts.models import User
from apps.inventory.models import Product
from apps.achievements.serializers import AchievementSerializer


# =============================================================================
# Input Serializers
# =============================================================================

class PurchaseFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for purchase filtering.

    Query Parameters:
        completed (bool): Only completed (true) or open (false) purchases
        date_from (date): Completed on or after this date
        date_to (date): Completed on or before this date
    """

    completed = serializers.BooleanField(required=False, allow_null=True, default=None)
    date_from = serializers.DateField(required=False)
    date_to = serializers.DateField(required=False)

    def validate(self, attrs):
        """Validate date range."""
        date_from = attrs.get('date_from')
        date_to = attrs.get('date_to')

        if date_from and date_to:
            if date_from > date_to:
                raise serializers.ValidationError({
                    'date_to': 'End date must be after start date'
                })

        return attrs


class PaymentFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for payment listing.

    Query Parameters:
        user (int): Whose payments to list (staff only)
    """

    user = serializers.IntegerField(required=False, min_value=1)


class ScanInputSerializer(serializers.Serializer):
    """
    Validate input for scanning an item.

    Fields:
        amount (decimal): Price charged
        product (int): Optional inventory product ID
    """

    amount = serializers.DecimalField(max_digits=8, decimal_places=2)
    product = serializers.PrimaryKeyRelatedField(
        queryset=Product.objects.all(),
        required=False,
        allow_null=True
    )


class PaymentInputSerializer(serializers.Serializer):
    """Validate input for recording a payment (staff only)."""

    user = serializers.PrimaryKeyRelatedField(queryset=User.objects.all())
    amount = serializers.DecimalField(max_digits=10, decimal_places=2)
    notes = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')


# =============================================================================
# Output Serializers
# =============================================================================

class ScanSerializer(serializers.ModelSerializer):
    product_name = serializers.CharField(source='product.name', read_only=True, default=None)

    class Meta:
        model = Scan
        fields = ['id', 'purchase', 'product', 'product_name', 'amount', 'scanned_at']
        read_only_fields = fields


class PurchaseSerializer(serializers.ModelSerializer):
    """Purchase with its scans and total."""

    scans = ScanSerializer(many=True, read_only=True)
    total_amount = serializers.SerializerMethodField()
    is_completed = serializers.BooleanField(read_only=True)

    class Meta:
        model = Purchase
        fields = ['id', 'user', 'created_at', 'completed_at', 'is_completed', 'total_amount', 'scans']
        read_only_fields = fields

    def get_total_amount(self, obj) -> str:
        # Uses prefetched scans
        total = sum((scan.amount for scan in obj.scans.all()), Decimal('0.00'))
        return f"{total:.2f}"


class PaymentSerializer(serializers.ModelSerializer):
    recorded_by_username = serializers.CharField(source='recorded_by.username', read_only=True, default=None)

    class Meta:
        model = Payment
        fields = ['id', 'user', 'amount', 'notes', 'recorded_by_username', 'paid_at']
        read_only_fields = fields


class BalanceSerializer(serializers.Serializer):
    total_spent = serializers.DecimalField(max_digits=12, decimal_places=2)
    total_paid = serializers.DecimalField(max_digits=12, decimal_places=2)
    debt = serializers.DecimalField(max_digits=12, decimal_places=2)


class ScanResultSerializer(serializers.Serializer):
    scan = ScanSerializer()
    achievements = AchievementSerializer(many=True)


class CompletionResultSerializer(serializers.Serializer):
    purchase = PurchaseSerializer()
    achievements = AchievementSerializer(many=True)
