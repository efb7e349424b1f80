"""Abstract repository for the Category aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.category import Category


class CategoryRepository(ABC):

    @abstractmethod
    def get_by_id(self, category_id: int) -> Category | None:
        """Return a category by its ID, or None if not found."""

    @abstractmethod
    def get_by_title(self, title: str) -> Category | None:
        """Return the category whose title matches, ignoring case."""

    @abstractmethod
    def exists_by_title(self, title: str, exclude_id: int | None = None) -> bool:
        """True if another category already uses ``title`` (ignoring case).

        When ``exclude_id`` is given, that record is not considered.
        """

    @abstractmethod
    def list_all(self) -> list[Category]:
        """Return every category, sentinels included."""

    @abstractmethod
    def list_excluding_reserved(self) -> list[Category]:
        """Return every category except the reserved sentinels."""

    @abstractmethod
    def save(self, category: Category) -> Category:
        """Persist a new or updated category, assigning an ID if needed."""

    @abstractmethod
    def delete(self, category: Category) -> None:
        """Remove the category row."""
