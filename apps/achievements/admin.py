# ==========================================
# apps/achievements/admin.py
# ==========================================

from django.contrib import admin
from django.utils.html import format_html
from .models import Achievement, UserAchievement


@admin.register(Achievement)
class AchievementAdmin(admin.ModelAdmin):
    list_display = ['code', 'name', 'category', 'get_earned_count']
    list_filter = ['category']
    search_fields = ['code', 'name', 'description']
    ordering = ['category', 'code']

    def get_earned_count(self, obj):
        return obj.earned_records.count()
    get_earned_count.short_description = 'Earned'


@admin.register(UserAchievement)
class UserAchievementAdmin(admin.ModelAdmin):
    """Earned achievements with acknowledgement status."""

    list_display = ['user', 'achievement', 'earned_at', 'shown_badge', 'debt_at_earning']
    list_filter = ['shown', 'achievement__category', 'earned_at']
    search_fields = ['user__username', 'achievement__code', 'achievement__name']
    date_hierarchy = 'earned_at'
    raw_id_fields = ['user']
    actions = ['mark_as_shown']

    def get_queryset(self, request):
        return super().get_queryset(request).select_related('user', 'achievement')

    def shown_badge(self, obj):
        """Display shown flag as colored badge."""
        bg, label = ('#6B8E5E', 'Shown') if obj.shown else ('#E5C49A', 'New')
        return format_html(
            '<span style="background: {}; color: white; padding: 3px 8px; '
            'border-radius: 10px; font-size: 11px;">{}</span>',
            bg, label
        )
    shown_badge.short_description = 'Status'

    @admin.action(description='Mark selected as shown')
    def mark_as_shown(self, request, queryset):
        updated = queryset.update(shown=True)
        self.message_user(request, f'{updated} achievement(s) marked as shown.')
