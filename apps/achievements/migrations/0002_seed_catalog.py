# Generated manually: seed the achievement catalog

from django.db import migrations


CATALOG = [
    # (code, name, description, category)
    ('BIG_SPENDER_2', 'Snack Nibbler', 'Spent €2 or more in a single purchase', 'single_purchase'),
    ('BIG_SPENDER_3', 'Snack Attack!', 'Spent €3 or more in a single purchase', 'single_purchase'),
    ('BIG_SPENDER_4', 'Hungry Hippo', 'Spent €4 or more in a single purchase', 'single_purchase'),
    ('BIG_SPENDER_5', 'Snack Hoarder', 'Spent €5 or more in a single purchase', 'single_purchase'),
    ('BIG_SPENDER_6', 'The Whale', 'Spent €6 or more in a single purchase', 'single_purchase'),

    ('DAILY_BUYER_3', 'Hat Trick', 'Made 3 or more purchases in a single day', 'daily_activity'),
    ('DAILY_BUYER_5', 'Frequent Flyer', 'Made 5 or more purchases in a single day', 'daily_activity'),
    ('DAILY_BUYER_10', 'Snack Marathon', 'Made 10 or more purchases in a single day', 'daily_activity'),

    ('STREAK_DAILY_3', 'Three-peat', 'Made a purchase 3 days in a row', 'streak'),
    ('STREAK_DAILY_7', 'Week Warrior', 'Made a purchase 7 days in a row', 'streak'),
    ('STREAK_DAILY_14', 'Fortnight Fanatic', 'Made a purchase 14 days in a row', 'streak'),
    ('STREAK_DAILY_30', 'Snack Addict', 'Made a purchase 30 days in a row', 'streak'),
    ('STREAK_WEEKLY_4', 'Monthly Muncher', 'Made at least one purchase per week for 4 weeks', 'streak'),

    ('COMEBACK_30', 'Long Time No See', 'First purchase after 1 month away', 'comeback'),
    ('COMEBACK_60', 'The Return', 'First purchase after 2 months away', 'comeback'),
    ('COMEBACK_90', 'Lazarus Rising', 'First purchase after 3 months away', 'comeback'),

    ('IN_DEBT_15', 'Tab Starter', 'Unpaid balance of €15 or more', 'high_debt'),
    ('IN_DEBT_20', 'Credit Curious', 'Unpaid balance of €20 or more', 'high_debt'),
    ('IN_DEBT_25', 'Living on Credit', 'Unpaid balance of €25 or more', 'high_debt'),
    ('IN_DEBT_30', "Debt Collector's Friend", 'Unpaid balance of €30 or more', 'high_debt'),
    ('IN_DEBT_35', 'Financial Freedom? Never Heard of It', 'Unpaid balance of €35 or more', 'high_debt'),

    ('TOTAL_SPENT_50', 'First Fifty', 'Spent €50 or more in total', 'total_spent'),
    ('TOTAL_SPENT_100', 'Century Club', 'Spent €100 or more in total', 'total_spent'),
    ('TOTAL_SPENT_150', 'Snack Connoisseur', 'Spent €150 or more in total', 'total_spent'),
    ('TOTAL_SPENT_200', 'Snackbox Legend', 'Spent €200 or more in total', 'total_spent'),
    ('TOTAL_SPENT_300', 'Snack Royalty', 'Spent €300 or more in total', 'total_spent'),
    ('TOTAL_SPENT_500', 'Snack God', 'Spent €500 or more in total', 'total_spent'),
]


def seed_catalog(apps, schema_editor):
    Achievement = apps.get_model('achievements', 'Achievement')
    for code, name, description, category in CATALOG:
        Achievement.objects.update_or_create(
            code=code,
            defaults={
                'name': name,
                'description': description,
                'category': category,
            },
        )


def remove_catalog(apps, schema_editor):
    Achievement = apps.get_model('achievements', 'Achievement')
    Achievement.objects.filter(code__in=[row[0] for row in CATALOG]).delete()


class Migration(migrations.Migration):

    dependencies = [
        ('achievements', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(seed_catalog, remove_catalog),
    ]
