"""Product aggregate.

Products are never removed from the store. Deleting one moves it into the
``Deleted`` category so that historical references (past orders, reports)
keep resolving.
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.model.category import Category
from catalog.domain.model.value_objects import Money, Quantity


@dataclass
class Product:
    """A product in the catalog.

    This is an aggregate root. It always belongs to exactly one category;
    the stored price is the list price, before any discount.
    """

    id: int | None
    title: str
    image_url: str
    sku: str
    price: Money
    quantity: Quantity
    category: Category

    @property
    def is_deleted(self) -> bool:
        return self.category.is_deleted_bucket

    def move_to(self, category: Category) -> None:
        self.category = category
