"""Application service: product lifecycle.

Every write re-validates the product's fields and re-resolves its
category against the store. Deletion is soft: the product is moved into
the ``Deleted`` category and the row is kept.

Reads go through the pricing transform. The discount flag is fetched
once per call, so a listing is priced against a single snapshot.
"""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal

import structlog

from catalog.application.dto import ProductView
from catalog.domain.exceptions import (
    CategoryNotFoundError,
    ProductNotFoundError,
    ValidationError,
)
from catalog.domain.model.category import DELETED_TITLE, Category
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money, Quantity
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.feature_flags import FeatureFlagGateway
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.pricing import (
    DISCOUNT_FEATURE,
    DISCOUNT_RATIO,
    displayed_price,
)
from catalog.domain.service.reserved_categories import require_reserved
from catalog.domain.validation import (
    Rule,
    ensure_valid,
    is_blank,
    is_finite,
    is_non_negative,
)

logger = structlog.get_logger()


class ProductService:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        feature_flags: FeatureFlagGateway,
        discount_feature: str = DISCOUNT_FEATURE,
        discount_ratio: Decimal = DISCOUNT_RATIO,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo
        self._feature_flags = feature_flags
        self._discount_feature = discount_feature
        self._discount_ratio = discount_ratio

    # --- Queries --------------------------------------------------------------

    def list_active(self) -> list[ProductView]:
        products = self._product_repo.list_excluding_deleted()
        discount_active = self._discount_active()
        return [self._present(p, discount_active) for p in products]

    def get_by_id(self, product_id: int) -> ProductView:
        product = self._product_repo.get_active_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(f"Product #{product_id} not found")
        return self._present(product, self._discount_active())

    # --- Commands -------------------------------------------------------------

    def create(self, view: ProductView) -> ProductView:
        ensure_valid(self._full_rules(view))
        category = self._resolve_category(view.category.id)

        product = self._product_repo.save(self._build(None, view, category))
        logger.info(
            "Product created",
            product_id=product.id,
            sku=product.sku,
            category_id=category.id,
        )
        return ProductView.of(product)

    def update(self, view: ProductView) -> ProductView:
        """Replace every field of the product identified by ``view.id``.

        A missing ID is reported as a missing product, not as bad input.
        """
        if view.id is None:
            raise ProductNotFoundError("Product ID is required to update a product")
        if not self._product_repo.exists_by_id(view.id):
            raise ProductNotFoundError(f"Product #{view.id} not found")

        ensure_valid(self._full_rules(view))
        category = self._resolve_category(view.category.id)

        product = self._product_repo.save(self._build(view.id, view, category))
        logger.info("Product updated", product_id=product.id, category_id=category.id)
        return ProductView.of(product)

    def update_by_id(self, product_id: int, view: ProductView) -> ProductView:
        """Merge the non-None fields of ``view`` onto the stored product."""
        existing = self._product_repo.get_by_id(product_id)
        if existing is None:
            raise ProductNotFoundError(f"Product #{product_id} not found")

        ensure_valid(self._partial_rules(view))

        changes: dict = {}
        if view.title is not None:
            changes["title"] = view.title
        if view.image_url is not None:
            changes["image_url"] = view.image_url
        if view.sku is not None:
            changes["sku"] = view.sku
        if view.price is not None:
            changes["price"] = Money.of(view.price)
        if view.quantity is not None:
            changes["quantity"] = Quantity(view.quantity)
        if view.category is not None and view.category.id is not None:
            changes["category"] = self._resolve_category(view.category.id)

        product = self._product_repo.save(replace(existing, **changes))
        logger.info(
            "Product updated",
            product_id=product.id,
            fields=sorted(changes),
        )
        return ProductView.of(product)

    def delete_by_id(self, product_id: int) -> None:
        """Soft-delete: move the product into the ``Deleted`` category."""
        product = self._product_repo.get_active_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(f"Product #{product_id} not found")

        deleted = require_reserved(
            self._category_repo, DELETED_TITLE, operation="product.delete"
        )
        product.move_to(deleted)
        self._product_repo.save(product)
        logger.info("Product deleted", product_id=product_id, category_id=deleted.id)

    # --- Validation -----------------------------------------------------------

    @staticmethod
    def _full_rules(view: ProductView) -> list[Rule]:
        return [
            Rule("title", "Product title is required", lambda: not is_blank(view.title)),
            Rule("image_url", "Product image URL is required",
                 lambda: not is_blank(view.image_url)),
            Rule("sku", "Product SKU is required", lambda: not is_blank(view.sku)),
            Rule("price", "Product price is required", lambda: view.price is not None),
            Rule("price", "Product price must be a finite number",
                 lambda: is_finite(view.price)),
            Rule("price", "Product price cannot be negative",
                 lambda: is_non_negative(view.price)),
            Rule("quantity", "Product quantity is required",
                 lambda: view.quantity is not None),
            Rule("quantity", "Product quantity cannot be negative",
                 lambda: is_non_negative(view.quantity)),
            Rule("category", "Product category is required",
                 lambda: view.category is not None),
            Rule("category", "Product category ID is required",
                 lambda: view.category.id is not None),
        ]

    @staticmethod
    def _partial_rules(view: ProductView) -> list[Rule]:
        return [
            Rule("title", "Product title cannot be blank",
                 lambda: view.title is None or not is_blank(view.title)),
            Rule("image_url", "Product image URL cannot be blank",
                 lambda: view.image_url is None or not is_blank(view.image_url)),
            Rule("sku", "Product SKU cannot be blank",
                 lambda: view.sku is None or not is_blank(view.sku)),
            Rule("price", "Product price must be a finite number",
                 lambda: view.price is None or is_finite(view.price)),
            Rule("price", "Product price cannot be negative",
                 lambda: view.price is None or is_non_negative(view.price)),
            Rule("quantity", "Product quantity cannot be negative",
                 lambda: view.quantity is None or is_non_negative(view.quantity)),
        ]

    # --- Internal helpers -----------------------------------------------------

    def _resolve_category(self, category_id: int) -> Category:
        category = self._category_repo.get_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(f"Category #{category_id} not found")
        # Only delete_by_id may move a product into the Deleted bucket.
        if category.is_deleted_bucket:
            raise ValidationError(
                f"Products cannot be assigned to the '{DELETED_TITLE}' category"
            )
        return category

    @staticmethod
    def _build(product_id: int | None, view: ProductView, category: Category) -> Product:
        return Product(
            id=product_id,
            title=view.title,
            image_url=view.image_url,
            sku=view.sku,
            price=Money.of(view.price),
            quantity=Quantity(view.quantity),
            category=category,
        )

    def _discount_active(self) -> bool:
        return self._feature_flags.is_active(self._discount_feature)

    def _present(self, product: Product, discount_active: bool) -> ProductView:
        price = displayed_price(product.price, discount_active, self._discount_ratio)
        return ProductView.of(product, price=price)
