"""
Management command to verify every awardable code has a catalog entry.

Run on deploy; exits non-zero when codes are missing.

Usage:
    python manage.py check_achievement_catalog
"""

from django.core.management.base import BaseCommand, CommandError
from apps.achievements import rules
from apps.achievements.services import validate_catalog


class Command(BaseCommand):
    help = 'Check that the achievement catalog contains every awardable code'

    def handle(self, *args, **options):
        missing = validate_catalog()

        if missing:
            for code in missing:
                self.stdout.write(f'  - {code}')
            raise CommandError(f'{len(missing)} achievement code(s) missing from the catalog')

        self.stdout.write(
            self.style.SUCCESS(f'Achievement catalog OK ({len(rules.all_codes())} codes).')
        )
