# ==========================================
# apps/inventory/admin.py
# ==========================================

from django.contrib import admin
from .models import Product, ProductBatch, ShelvingAction
from .services.stock_calculation import calculate_shelf_quantity, calculate_storage_quantity


class ProductBatchInline(admin.TabularInline):
    model = ProductBatch
    extra = 0
    fields = ['best_before_date', 'created_at']
    readonly_fields = ['created_at']


class ShelvingActionInline(admin.TabularInline):
    model = ShelvingAction
    extra = 0
    fields = ['action_type', 'quantity', 'action_at']


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ['name', 'barcode', 'price', 'is_active', 'created_at']
    list_filter = ['is_active']
    search_fields = ['name', 'barcode']
    inlines = [ProductBatchInline]


@admin.register(ProductBatch)
class ProductBatchAdmin(admin.ModelAdmin):
    """Batches with derived stock columns."""

    list_display = [
        'product',
        'best_before_date',
        'get_storage_quantity',
        'get_shelf_quantity',
        'created_at',
    ]
    list_filter = ['best_before_date']
    search_fields = ['product__name', 'product__barcode']
    inlines = [ShelvingActionInline]

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('product').prefetch_related('shelving_actions')

    def get_storage_quantity(self, obj):
        return calculate_storage_quantity(obj.shelving_actions.all())
    get_storage_quantity.short_description = 'In storage'

    def get_shelf_quantity(self, obj):
        return calculate_shelf_quantity(obj.shelving_actions.all())
    get_shelf_quantity.short_description = 'On shelf'


@admin.register(ShelvingAction)
class ShelvingActionAdmin(admin.ModelAdmin):
    list_display = ['batch', 'action_type', 'quantity', 'action_at']
    list_filter = ['action_type', 'action_at']
    date_hierarchy = 'action_at'
