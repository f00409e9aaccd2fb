from rest_framework import serializers
from .models import Product, ProductBatch, ShelvingAction, ShelvingActionType
from .services.stock_calculation import calculate_shelf_quantity, calculate_storage_quantity


# =============================================================================
# Input Serializers
# =============================================================================

class BatchFilterSerializer(serializers.Serializer):
    """
    Validate query parameters for batch filtering.

    Query Parameters:
        product (int): Only batches of this product
    """

    product = serializers.IntegerField(required=False, min_value=1)


class ShelvingActionInputSerializer(serializers.Serializer):
    """Validate input for recording a stock movement."""

    batch = serializers.IntegerField()
    action_type = serializers.ChoiceField(choices=ShelvingActionType.choices)
    quantity = serializers.IntegerField(min_value=1)
    action_at = serializers.DateTimeField(required=False)


# =============================================================================
# Output Serializers
# =============================================================================

class ProductSerializer(serializers.ModelSerializer):
    class Meta:
        model = Product
        fields = ['id', 'name', 'barcode', 'price', 'is_active', 'created_at']
        read_only_fields = ['id', 'created_at']


class ShelvingActionSerializer(serializers.ModelSerializer):
    action_type_display = serializers.CharField(source='get_action_type_display', read_only=True)

    class Meta:
        model = ShelvingAction
        fields = ['id', 'batch', 'action_type', 'action_type_display', 'quantity', 'action_at']
        read_only_fields = fields


class ProductBatchSerializer(serializers.ModelSerializer):
    """Batch with stock levels derived from its shelving actions."""

    product_name = serializers.CharField(source='product.name', read_only=True)
    storage_quantity = serializers.SerializerMethodField()
    shelf_quantity = serializers.SerializerMethodField()

    class Meta:
        model = ProductBatch
        fields = [
            'id',
            'product',
            'product_name',
            'best_before_date',
            'storage_quantity',
            'shelf_quantity',
            'created_at',
        ]
        read_only_fields = fields

    def get_storage_quantity(self, obj) -> int:
        return calculate_storage_quantity(obj.shelving_actions.all())

    def get_shelf_quantity(self, obj) -> int:
        return calculate_shelf_quantity(obj.shelving_actions.all())


class ProductStockSummarySerializer(serializers.Serializer):
    product = ProductSerializer()
    storage_quantity = serializers.IntegerField()
    shelf_quantity = serializers.IntegerField()
    earliest_best_before_in_storage = serializers.DateField(allow_null=True)
    earliest_best_before_on_shelf = serializers.DateField(allow_null=True)
    average_shelved_per_week = serializers.FloatField()
