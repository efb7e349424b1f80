"""Abstract repository for the Product aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.category import Category
from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID, including soft-deleted ones."""

    @abstractmethod
    def get_active_by_id(self, product_id: int) -> Product | None:
        """Return a product by its ID unless it is soft-deleted."""

    @abstractmethod
    def exists_by_id(self, product_id: int) -> bool:
        """True if a row exists for the ID (soft-deleted rows count)."""

    @abstractmethod
    def list_excluding_deleted(self) -> list[Product]:
        """Return every product not owned by the ``Deleted`` category."""

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Persist a new or updated product, assigning an ID if needed."""

    @abstractmethod
    def reassign_category(self, old_category_id: int, new_category: Category) -> int:
        """Move every product of ``old_category_id`` to ``new_category``.

        Returns the number of products moved.
        """
