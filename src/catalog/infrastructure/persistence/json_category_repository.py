"""JSON-file-backed implementation of CategoryRepository.

A fresh store is seeded with the two reserved categories, the same way
a database migration would insert them.
"""

from __future__ import annotations

import json
from pathlib import Path

from catalog.domain.model.category import RESERVED_TITLES, Category, same_title
from catalog.domain.repository.category_repository import CategoryRepository


class JsonCategoryRepository(CategoryRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- CategoryRepository interface -----------------------------------------

    def get_by_id(self, category_id: int) -> Category | None:
        for raw in self._load_raw():
            if raw["id"] == category_id:
                return self._to_domain(raw)
        return None

    def get_by_title(self, title: str) -> Category | None:
        for raw in self._load_raw():
            if same_title(raw["title"], title):
                return self._to_domain(raw)
        return None

    def exists_by_title(self, title: str, exclude_id: int | None = None) -> bool:
        return any(
            same_title(raw["title"], title) and raw["id"] != exclude_id
            for raw in self._load_raw()
        )

    def list_all(self) -> list[Category]:
        return [self._to_domain(raw) for raw in self._load_raw()]

    def list_excluding_reserved(self) -> list[Category]:
        categories = [self._to_domain(raw) for raw in self._load_raw()]
        return [c for c in categories if not c.is_reserved]

    def save(self, category: Category) -> Category:
        records = self._load_raw()

        if category.id is None:
            category.id = max((r["id"] for r in records), default=0) + 1

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(records):
            if raw["id"] == category.id:
                records[i] = self._to_raw(category)
                break
        else:
            records.append(self._to_raw(category))

        self._persist_raw(records)
        return category

    def delete(self, category: Category) -> None:
        records = [r for r in self._load_raw() if r["id"] != category.id]
        self._persist_raw(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(category: Category) -> dict:
        return {
            "id": category.id,
            "title": category.title,
            "image_url": category.image_url,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Category:
        return Category(
            id=raw["id"],
            title=raw["title"],
            image_url=raw.get("image_url"),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            seed = [
                {"id": i, "title": title, "image_url": None}
                for i, title in enumerate(RESERVED_TITLES, start=1)
            ]
            self._persist_raw(seed)
