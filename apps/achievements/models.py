from django.db import models
from django.utils import timezone


class AchievementCategory(models.TextChoices):
    SINGLE_PURCHASE = 'single_purchase', 'Single purchase'
    DAILY_ACTIVITY = 'daily_activity', 'Daily activity'
    STREAK = 'streak', 'Streak'
    COMEBACK = 'comeback', 'Comeback'
    HIGH_DEBT = 'high_debt', 'High debt'
    TOTAL_SPENT = 'total_spent', 'Total spent'
    TIME_OF_DAY = 'time_of_day', 'Time of day'
    MISC = 'misc', 'Misc'


class Achievement(models.Model):
    """Catalog entry. Seeded by migration, read-only for the engine."""

    code = models.CharField(max_length=64, unique=True)
    name = models.CharField(max_length=100)
    description = models.CharField(max_length=255)
    category = models.CharField(
        max_length=32,
        choices=AchievementCategory.choices
    )
    image_url = models.CharField(max_length=500, blank=True)

    class Meta:
        db_table = 'achievements'
        ordering = ['category', 'code']

    def __str__(self):
        return f"{self.name} ({self.code})"


class UserAchievement(models.Model):
    """
    An achievement earned by a user.

    Repeats of the same achievement are allowed by the schema; the
    evaluation engine never awards a code the user already holds.
    """

    user = models.ForeignKey(
        'accounts.User',
        on_delete=models.CASCADE,
        related_name='earned_achievements'
    )
    achievement = models.ForeignKey(
        Achievement,
        on_delete=models.CASCADE,
        related_name='earned_records'
    )

    earned_at = models.DateTimeField(default=timezone.now)
    shown = models.BooleanField(default=False)

    # User's debt when a high-debt achievement was earned
    debt_at_earning = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True
    )

    class Meta:
        db_table = 'user_achievements'
        indexes = [
            models.Index(fields=['user', 'shown'], name='user_ach_user_shown_idx'),
            models.Index(fields=['user', 'earned_at'], name='user_ach_user_earned_idx'),
        ]
        ordering = ['-earned_at']

    def __str__(self):
        return f"{self.user} earned {self.achievement.code}"
