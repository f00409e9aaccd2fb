from rest_framework import serializers
from .models import Achievement, UserAchievement


class AchievementSerializer(serializers.ModelSerializer):
    category_display = serializers.CharField(source='get_category_display', read_only=True)

    class Meta:
        model = Achievement
        fields = ['id', 'code', 'name', 'description', 'category', 'category_display', 'image_url']
        read_only_fields = fields


class UserAchievementSerializer(serializers.ModelSerializer):
    """Earned achievement with its catalog entry inlined."""

    achievement = AchievementSerializer(read_only=True)

    class Meta:
        model = UserAchievement
        fields = ['id', 'achievement', 'earned_at', 'shown', 'debt_at_earning']
        read_only_fields = fields


class MarkShownInputSerializer(serializers.Serializer):
    """Validate input for acknowledging earned achievements."""

    ids = serializers.ListField(
        child=serializers.IntegerField(min_value=1),
        required=False,
        help_text="Earned record IDs to mark as shown. Omit to mark all."
    )


class MarkShownResponseSerializer(serializers.Serializer):
    updated = serializers.IntegerField()
