"""System checks for the achievements app."""

from django.core import checks
from django.db import DatabaseError

from apps.achievements.models import Achievement
from apps.achievements.services import get_missing_codes


def check_achievement_catalog(app_configs=None, **kwargs):
    """
    Warn when awardable codes have no catalog row.

    Runs with every management command, so a database that has not been
    migrated yet is skipped rather than reported.
    """
    try:
        missing = get_missing_codes()
    except DatabaseError:
        return []

    if not missing:
        return []
    return [
        checks.Warning(
            f"Achievement catalog is missing {len(missing)} code(s): {', '.join(missing)}",
            hint="Run 'python manage.py migrate achievements' to seed the catalog.",
            obj=Achievement,
            id='achievements.W001',
        )
    ]
