"""Application service: category lifecycle.

Enforces the category invariants: titles are unique ignoring case, the
reserved sentinels can be neither created, renamed nor deleted, and a
deleted category's products move to ``No Category`` before the row goes.
"""

from __future__ import annotations

import structlog

from catalog.application.dto import CategoryView
from catalog.domain.exceptions import CategoryNotFoundError, ValidationError
from catalog.domain.model.category import (
    NO_CATEGORY_TITLE,
    Category,
    is_reserved_title,
    same_title,
)
from catalog.domain.repository.category_repository import CategoryRepository
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.reserved_categories import require_reserved
from catalog.domain.validation import Rule, ensure_valid, is_blank

logger = structlog.get_logger()


class CategoryService:

    def __init__(
        self,
        category_repo: CategoryRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._category_repo = category_repo
        self._product_repo = product_repo

    # --- Queries --------------------------------------------------------------

    def list_active(self) -> list[CategoryView]:
        return [CategoryView.of(c) for c in self._category_repo.list_excluding_reserved()]

    def get_by_id(self, category_id: int) -> CategoryView:
        """Return a user category. The sentinels are not visible here."""
        category = self._category_repo.get_by_id(category_id)
        if category is None or category.is_reserved:
            raise CategoryNotFoundError(f"Category #{category_id} not found")
        return CategoryView.of(category)

    # --- Commands -------------------------------------------------------------

    def create(self, title: str | None, image_url: str | None = None) -> CategoryView:
        ensure_valid([
            Rule("title", "Category title is required", lambda: not is_blank(title)),
        ])
        title = title.strip()

        if is_reserved_title(title):
            raise ValidationError(f"Category title '{title}' is reserved")
        if self._category_repo.exists_by_title(title):
            raise ValidationError(f"Category '{title}' already exists")

        category = self._category_repo.save(
            Category(id=None, title=title, image_url=image_url)
        )
        logger.info("Category created", category_id=category.id, title=category.title)
        return CategoryView.of(category)

    def update(self, view: CategoryView) -> CategoryView:
        """Overwrite title and image of the category identified by ``view.id``."""
        return self._update(view.id, view, keep_missing_image=False)

    def update_by_id(self, category_id: int | None, view: CategoryView) -> CategoryView:
        """Like ``update`` but the ID comes from the caller, not the payload.

        An image left out of the payload keeps its stored value.
        """
        return self._update(category_id, view, keep_missing_image=True)

    def delete_by_id(self, category_id: int) -> None:
        """Delete a user category, moving its products to ``No Category``.

        Products are reassigned *before* the row is removed so that no
        product ever points at a missing category.
        """
        category = self._category_repo.get_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(f"Category #{category_id} not found")
        if category.is_reserved:
            raise ValidationError(
                f"Reserved category '{category.title}' cannot be deleted"
            )

        no_category = require_reserved(
            self._category_repo, NO_CATEGORY_TITLE, operation="category.delete"
        )

        moved = self._product_repo.reassign_category(category.id, no_category)
        self._category_repo.delete(category)
        logger.info(
            "Category deleted",
            category_id=category_id,
            title=category.title,
            products_reassigned=moved,
        )

    # --- Internal helpers -----------------------------------------------------

    def _update(
        self,
        category_id: int | None,
        view: CategoryView,
        keep_missing_image: bool,
    ) -> CategoryView:
        ensure_valid([
            Rule("id", "Category ID is required", lambda: category_id is not None),
            Rule("title", "Category title is required", lambda: not is_blank(view.title)),
        ])
        title = view.title.strip()

        category = self._category_repo.get_by_id(category_id)
        if category is None:
            raise CategoryNotFoundError(f"Category #{category_id} not found")

        if self._category_repo.exists_by_title(title, exclude_id=category_id):
            raise ValidationError(f"Category '{title}' already exists")
        if category.is_reserved and not same_title(title, category.title):
            raise ValidationError(
                f"Reserved category '{category.title}' cannot be renamed"
            )
        if not category.is_reserved and is_reserved_title(title):
            raise ValidationError(f"Category title '{title}' is reserved")

        image_url = view.image_url
        if image_url is None and keep_missing_image:
            image_url = category.image_url

        category.rename(title, image_url)
        saved = self._category_repo.save(category)
        logger.info("Category updated", category_id=saved.id, title=saved.title)
        return CategoryView.of(saved)
