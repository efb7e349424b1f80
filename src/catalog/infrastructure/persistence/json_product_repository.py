"""JSON-file-backed implementation of ProductRepository.

Products are stored with their category ID only; the owning Category is
loaded from the category repository when a product is read.
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

import structlog

from catalog.domain.model.category import Category
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money, Quantity
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger()


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path, category_repo: CategoryRepository) -> None:
        self._file_path = file_path
        self._category_repo = category_repo
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: int) -> Product | None:
        for raw in self._load_raw():
            if raw["id"] == product_id:
                return self._to_domain(raw, self._categories_by_id())
        return None

    def get_active_by_id(self, product_id: int) -> Product | None:
        product = self.get_by_id(product_id)
        if product is None or product.is_deleted:
            return None
        return product

    def exists_by_id(self, product_id: int) -> bool:
        return any(raw["id"] == product_id for raw in self._load_raw())

    def list_excluding_deleted(self) -> list[Product]:
        categories = self._categories_by_id()
        products = [self._to_domain(raw, categories) for raw in self._load_raw()]
        return [p for p in products if not p.is_deleted]

    def save(self, product: Product) -> Product:
        records = self._load_raw()

        if product.id is None:
            product.id = max((r["id"] for r in records), default=0) + 1

        for i, raw in enumerate(records):
            if raw["id"] == product.id:
                records[i] = self._to_raw(product)
                break
        else:
            records.append(self._to_raw(product))

        self._persist_raw(records)
        return product

    def reassign_category(self, old_category_id: int, new_category: Category) -> int:
        records = self._load_raw()
        moved = 0
        for raw in records:
            if raw["category_id"] == old_category_id:
                raw["category_id"] = new_category.id
                moved += 1
        if moved:
            self._persist_raw(records)
        return moved

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "title": product.title,
            "image_url": product.image_url,
            "sku": product.sku,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "quantity": product.quantity.value,
            "category_id": product.category.id,
        }

    @staticmethod
    def _to_domain(raw: dict, categories: dict[int, Category]) -> Product:
        category = categories.get(raw["category_id"])
        if category is None:
            # Dangling reference; keep the ID so the row is still readable.
            logger.warning(
                "Product references a missing category",
                product_id=raw["id"],
                category_id=raw["category_id"],
            )
            category = Category(id=raw["category_id"], title="")
        return Product(
            id=raw["id"],
            title=raw["title"],
            image_url=raw["image_url"],
            sku=raw["sku"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            quantity=Quantity(raw["quantity"]),
            category=category,
        )

    # --- File helpers ---------------------------------------------------------

    def _categories_by_id(self) -> dict[int, Category]:
        return {c.id: c for c in self._category_repo.list_all()}

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
