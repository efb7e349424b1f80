"""Category aggregate and the reserved sentinel titles.

Two categories are never owned by users. ``Deleted`` holds soft-deleted
products and ``No Category`` collects products whose category was removed.
They are identified by title, case-insensitively.
"""

from __future__ import annotations

from dataclasses import dataclass

DELETED_TITLE = "Deleted"
NO_CATEGORY_TITLE = "No Category"
RESERVED_TITLES = (DELETED_TITLE, NO_CATEGORY_TITLE)


def is_reserved_title(title: str | None) -> bool:
    if title is None:
        return False
    folded = title.strip().casefold()
    return any(folded == reserved.casefold() for reserved in RESERVED_TITLES)


def same_title(a: str | None, b: str | None) -> bool:
    """Case-insensitive title comparison used for uniqueness checks."""
    if a is None or b is None:
        return False
    return a.strip().casefold() == b.strip().casefold()


@dataclass
class Category:
    """A product category.

    ``id`` is None until the repository assigns one on first save.
    """

    id: int | None
    title: str
    image_url: str | None = None

    @property
    def is_reserved(self) -> bool:
        return is_reserved_title(self.title)

    @property
    def is_deleted_bucket(self) -> bool:
        return same_title(self.title, DELETED_TITLE)

    def rename(self, title: str, image_url: str | None) -> None:
        self.title = title
        self.image_url = image_url
