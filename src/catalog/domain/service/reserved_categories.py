"""Domain service: resolution of the reserved sentinel categories.

The sentinels are seeded with the store and must always be there. A
missing sentinel is a corrupted store, never a user error, so it is
logged at critical level and raised as InconsistentStateError.
"""

from __future__ import annotations

import structlog

from catalog.domain.exceptions import InconsistentStateError
from catalog.domain.model.category import Category
from catalog.domain.repository.category_repository import CategoryRepository

logger = structlog.get_logger()


def require_reserved(
    category_repo: CategoryRepository,
    title: str,
    operation: str,
) -> Category:
    category = category_repo.get_by_title(title)
    if category is None:
        logger.critical(
            "Reserved category missing from store",
            reserved_title=title,
            operation=operation,
        )
        raise InconsistentStateError(
            f"Reserved category '{title}' is missing; the catalog store is inconsistent"
        )
    return category
