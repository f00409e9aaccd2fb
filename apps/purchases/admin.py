# ==========================================
# apps/purchases/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import Purchase, Scan, Payment


class ScanInline(admin.TabularInline):
    """Inline admin for scans within a purchase."""
    model = Scan
    extra = 0
    fields = ['product', 'amount', 'scanned_at']
    readonly_fields = ['scanned_at']


@admin.register(Purchase)
class PurchaseAdmin(admin.ModelAdmin):
    """
    Admin interface for Purchases.

    Lists purchases with completion status and total, scans inline.
    """

    list_display = [
        'id',
        'user',
        'created_at',
        'completed_at',
        'status_badge',
        'get_total',
    ]
    list_filter = ['completed_at', 'created_at']
    search_fields = ['user__username', 'user__email']
    date_hierarchy = 'created_at'
    raw_id_fields = ['user']
    inlines = [ScanInline]

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('user')

    def status_badge(self, obj):
        """Display completion status as colored badge."""
        bg, label = ('#6B8E5E', 'Completed') if obj.completed_at else ('#E5C49A', 'Open')
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, label
        )
    status_badge.short_description = 'Status'

    def get_total(self, obj):
        return f"{obj.total_amount()} EUR"
    get_total.short_description = 'Total'


@admin.register(Payment)
class PaymentAdmin(admin.ModelAdmin):
    list_display = ['user', 'amount', 'notes', 'recorded_by', 'paid_at']
    list_filter = ['paid_at']
    search_fields = ['user__username', 'user__email', 'notes']
    date_hierarchy = 'paid_at'
    raw_id_fields = ['user', 'recorded_by']

    def save_model(self, request, obj, form, change):
        if not obj.recorded_by_id:
            obj.recorded_by = request.user
        super().save_model(request, obj, form, change)
