"""Data Transfer Objects: plain containers that cross layer boundaries.

The same view types serve as input and output. On input every field may be
None: for full updates a None is a validation failure, for partial updates
it means "leave unchanged".
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from catalog.domain.model.category import Category
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money


@dataclass(frozen=True)
class CategoryView:
    id: int | None = None
    title: str | None = None
    image_url: str | None = None

    @staticmethod
    def of(category: Category) -> CategoryView:
        return CategoryView(
            id=category.id,
            title=category.title,
            image_url=category.image_url,
        )


@dataclass(frozen=True)
class ProductView:
    id: int | None = None
    title: str | None = None
    image_url: str | None = None
    sku: str | None = None
    price: Decimal | None = None
    quantity: int | None = None
    category: CategoryView | None = None

    @staticmethod
    def of(product: Product, price: Money | None = None) -> ProductView:
        """Build a view; ``price`` overrides the stored list price."""
        shown = price if price is not None else product.price
        return ProductView(
            id=product.id,
            title=product.title,
            image_url=product.image_url,
            sku=product.sku,
            price=shown.amount,
            quantity=product.quantity.value,
            category=CategoryView.of(product.category),
        )
