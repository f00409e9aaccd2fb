"""Domain exceptions for achievements app."""


class AchievementsServiceError(Exception):
    """Base exception for all achievements service errors."""
    pass


class AchievementPersistenceError(AchievementsServiceError):
    """Earned achievements could not be written. Nothing was persisted."""
    pass


class CatalogIncompleteError(AchievementsServiceError):
    """Catalog is missing codes the evaluation engine can award."""

    def __init__(self, missing_codes):
        self.missing_codes = list(missing_codes)
        super().__init__(
            f"Achievement catalog is missing: {', '.join(self.missing_codes)}"
        )
