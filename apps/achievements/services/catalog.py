"""Catalog consistency checks."""

import logging
from typing import List

from apps.achievements import rules
from apps.achievements.models import Achievement

from .exceptions import CatalogIncompleteError

logger = logging.getLogger(__name__)


def get_missing_codes() -> List[str]:
    """Award codes with no catalog row, in tier-table order."""
    present = set(Achievement.objects.values_list('code', flat=True))
    return [code for code in rules.all_codes() if code not in present]


def validate_catalog(*, strict: bool = False) -> List[str]:
    """
    Find award codes that have no catalog row.

    Args:
        strict: Raise instead of returning when codes are missing

    Returns:
        Missing codes in tier-table order (empty when complete)

    Raises:
        CatalogIncompleteError: If strict and any code is missing
    """
    missing = get_missing_codes()

    if missing:
        logger.warning(
            "Achievement catalog is missing %d code(s): %s",
            len(missing), ', '.join(missing)
        )
        if strict:
            raise CatalogIncompleteError(missing)
    return missing
