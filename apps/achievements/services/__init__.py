"""
Achievements services - Business logic layer.

- Evaluation engine (completed and open purchases)
- Earned achievement queries and acknowledgement
- Catalog validation
"""

from .evaluation import (
    evaluate_purchase,
    evaluate_open_purchase,
)

from .earned import (
    get_user_achievements,
    get_unshown_achievements,
    mark_achievements_shown,
)

from .catalog import (
    get_missing_codes,
    validate_catalog,
)

from .exceptions import (
    AchievementsServiceError,
    AchievementPersistenceError,
    CatalogIncompleteError,
)

__all__ = [
    # Evaluation
    'evaluate_purchase',
    'evaluate_open_purchase',
    # Earned Achievements
    'get_user_achievements',
    'get_unshown_achievements',
    'mark_achievements_shown',
    # Catalog
    'get_missing_codes',
    'validate_catalog',
    # Exceptions
    'AchievementsServiceError',
    'AchievementPersistenceError',
    'CatalogIncompleteError',
]
