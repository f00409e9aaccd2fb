"""
Management command to re-run achievement evaluation for completed purchases.

Useful after catalog additions. Codes a user already holds are never
awarded twice, so the command is safe to repeat.

Usage:
    python manage.py evaluate_achievements --user 12
    python manage.py evaluate_achievements --purchase 345 --dry-run
"""

from django.core.management.base import BaseCommand, CommandError
from apps.purchases.models import Purchase
from apps.achievements.services import evaluate_purchase


class Command(BaseCommand):
    help = 'Evaluate achievements for completed purchases'

    def add_arguments(self, parser):
        parser.add_argument('--user', type=int, help='Only purchases of this user ID')
        parser.add_argument('--purchase', type=int, help='Only this purchase ID')
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='List the purchases that would be evaluated without evaluating them',
        )

    def handle(self, *args, **options):
        if not options['user'] and not options['purchase']:
            raise CommandError('Pass --user and/or --purchase')

        purchases = Purchase.objects.filter(completed_at__isnull=False).order_by('completed_at')
        if options['user']:
            purchases = purchases.filter(user_id=options['user'])
        if options['purchase']:
            purchases = purchases.filter(id=options['purchase'])

        count = purchases.count()
        if count == 0:
            self.stdout.write(self.style.WARNING('No completed purchases match.'))
            return

        self.stdout.write(f'Found {count} completed purchase(s).')

        if options['dry_run']:
            for purchase in purchases:
                self.stdout.write(f'  - #{purchase.id} | user {purchase.user_id} | {purchase.completed_at}')
            self.stdout.write(self.style.WARNING('--dry-run mode: nothing evaluated.'))
            return

        awarded = 0
        for purchase in purchases:
            earned = evaluate_purchase(user_id=purchase.user_id, purchase_id=purchase.id)
            for achievement in earned:
                self.stdout.write(f'  + #{purchase.id}: {achievement.code}')
            awarded += len(earned)

        self.stdout.write(self.style.SUCCESS(f'Awarded {awarded} achievement(s).'))
