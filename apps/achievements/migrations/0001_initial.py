# Generated manually for the snackbox achievements app

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Achievement',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('code', models.CharField(max_length=64, unique=True)),
                ('name', models.CharField(max_length=100)),
                ('description', models.CharField(max_length=255)),
                ('category', models.CharField(choices=[('single_purchase', 'Single purchase'), ('daily_activity', 'Daily activity'), ('streak', 'Streak'), ('comeback', 'Comeback'), ('high_debt', 'High debt'), ('total_spent', 'Total spent'), ('time_of_day', 'Time of day'), ('misc', 'Misc')], max_length=32)),
                ('image_url', models.CharField(blank=True, max_length=500)),
            ],
            options={
                'db_table': 'achievements',
                'ordering': ['category', 'code'],
            },
        ),
        migrations.CreateModel(
            name='UserAchievement',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('earned_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('shown', models.BooleanField(default=False)),
                ('debt_at_earning', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True)),
                ('achievement', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='earned_records', to='achievements.achievement')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='earned_achievements', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'user_achievements',
                'ordering': ['-earned_at'],
            },
        ),
        migrations.AddIndex(
            model_name='userachievement',
            index=models.Index(fields=['user', 'shown'], name='user_ach_user_shown_idx'),
        ),
        migrations.AddIndex(
            model_name='userachievement',
            index=models.Index(fields=['user', 'earned_at'], name='user_ach_user_earned_idx'),
        ),
    ]
