from django.apps import AppConfig
from django.core import checks


class AchievementsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.achievements'
    label = 'achievements'

    def ready(self):
        from .checks import check_achievement_catalog
        checks.register(check_achievement_catalog)
