# ==========================================
# apps/accounts/admin.py
# ==========================================

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.db.models import Count
from django.utils.html import format_html
from apps.purchases.models import Payment
from apps.purchases.services import get_user_balance
from .models import User


class PaymentInline(admin.TabularInline):
    """Payments made by the user, newest first."""
    model = Payment
    fk_name = 'user'
    extra = 0
    fields = ['amount', 'notes', 'recorded_by', 'paid_at']
    readonly_fields = ['recorded_by', 'paid_at']
    ordering = ['-paid_at']


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """
    Admin interface for snackbox users.

    The list shows what each user currently owes and how many achievements
    they have earned. Balances are computed per row from scans and payments.
    """

    list_display = [
        'username',
        'email',
        'debt_badge',
        'achievement_count',
        'is_staff',
        'is_active',
        'last_login',
    ]
    list_filter = ['is_active', 'is_staff']
    search_fields = ['username', 'email']
    ordering = ['username']

    fieldsets = (
        (None, {
            'fields': ('username', 'email', 'password')
        }),
        ('Balance', {
            'fields': ('balance_summary',),
        }),
        ('Permissions', {
            'fields': ('is_active', 'is_staff', 'is_superuser', 'groups', 'user_permissions'),
            'classes': ('collapse',),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'last_login'),
            'classes': ('collapse',),
        }),
    )

    add_fieldsets = (
        (None, {
            'classes': ('wide',),
            'fields': ('username', 'email', 'password1', 'password2', 'is_staff'),
        }),
    )

    readonly_fields = ['balance_summary', 'created_at', 'last_login']
    inlines = [PaymentInline]

    def get_queryset(self, request):
        return super().get_queryset(request).annotate(
            _achievement_count=Count('earned_achievements', distinct=True)
        )

    def debt_badge(self, obj):
        """Red when the user owes money, green when settled or in credit."""
        debt = get_user_balance(user_id=obj.pk)['debt']
        bg = '#B85C5C' if debt > 0 else '#6B8E5E'
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{} EUR</span>',
            bg, debt
        )
    debt_badge.short_description = 'Debt'

    def achievement_count(self, obj):
        return obj._achievement_count
    achievement_count.short_description = 'Achievements'
    achievement_count.admin_order_field = '_achievement_count'

    def balance_summary(self, obj):
        if obj.pk is None:
            return '-'
        balance = get_user_balance(user_id=obj.pk)
        return (
            f"spent {balance['total_spent']} EUR, paid {balance['total_paid']} EUR, "
            f"owes {balance['debt']} EUR"
        )
    balance_summary.short_description = 'Balance'
