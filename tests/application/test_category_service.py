"""Tests for the category lifecycle.

Uses in-memory fake repositories, no file I/O.
"""

from decimal import Decimal

import pytest
from structlog.testing import capture_logs

from catalog.application.category_service import CategoryService
from catalog.application.dto import CategoryView
from catalog.domain.exceptions import (
    CategoryNotFoundError,
    InconsistentStateError,
    ValidationError,
)
from catalog.domain.model.category import Category
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money, Quantity
from tests.fakes import FakeCategoryRepository, FakeProductRepository

DELETED_ID = 1
NO_CATEGORY_ID = 2
ELECTRONICS_ID = 3
CLOTHING_ID = 4


def _categories(with_sentinels: bool = True) -> list[Category]:
    categories = [
        Category(id=ELECTRONICS_ID, title="Electronics", image_url="https://example.com/e.jpg"),
        Category(id=CLOTHING_ID, title="Clothing"),
    ]
    if with_sentinels:
        categories = [
            Category(id=DELETED_ID, title="Deleted"),
            Category(id=NO_CATEGORY_ID, title="No Category"),
        ] + categories
    return categories


def _product(product_id: int, category: Category) -> Product:
    return Product(
        id=product_id,
        title=f"Item {product_id}",
        image_url="https://example.com/item.jpg",
        sku=f"SKU-{product_id}",
        price=Money(Decimal("10.00")),
        quantity=Quantity(1),
        category=category,
    )


def _setup(
    categories: list[Category] | None = None,
) -> tuple[CategoryService, FakeCategoryRepository, FakeProductRepository]:
    category_repo = FakeCategoryRepository(_categories() if categories is None else categories)
    product_repo = FakeProductRepository()
    return CategoryService(category_repo, product_repo), category_repo, product_repo


class TestQueries:

    def test_list_active_hides_sentinels(self):
        service, _, _ = _setup()
        titles = [c.title for c in service.list_active()]
        assert titles == ["Electronics", "Clothing"]

    def test_list_active_empty_store(self):
        service, _, _ = _setup(categories=[])
        assert service.list_active() == []

    def test_get_by_id(self):
        service, _, _ = _setup()
        view = service.get_by_id(ELECTRONICS_ID)
        assert view == CategoryView(
            id=ELECTRONICS_ID, title="Electronics", image_url="https://example.com/e.jpg"
        )

    def test_get_by_id_unknown(self):
        service, _, _ = _setup()
        with pytest.raises(CategoryNotFoundError, match="#999 not found"):
            service.get_by_id(999)

    @pytest.mark.parametrize("sentinel_id", [DELETED_ID, NO_CATEGORY_ID])
    def test_get_by_id_hides_sentinels(self, sentinel_id):
        service, _, _ = _setup()
        with pytest.raises(CategoryNotFoundError):
            service.get_by_id(sentinel_id)


class TestCreate:

    def test_creates_with_store_assigned_id(self):
        service, category_repo, _ = _setup()
        view = service.create("Books", "https://example.com/books.jpg")
        assert view.id == CLOTHING_ID + 1
        assert category_repo.get_by_id(view.id).title == "Books"

    def test_trims_title(self):
        service, category_repo, _ = _setup()
        view = service.create("  Books  ")
        assert view.title == "Books"
        assert category_repo.get_by_id(view.id).title == "Books"

    def test_keeps_internal_whitespace(self):
        service, _, _ = _setup()
        assert service.create("  Home  Garden ").title == "Home  Garden"

    @pytest.mark.parametrize("title", [None, "", "   "])
    def test_blank_title_rejected(self, title):
        service, category_repo, _ = _setup()
        with pytest.raises(ValidationError, match="title is required"):
            service.create(title)
        assert category_repo.saved == []

    @pytest.mark.parametrize("title", ["Electronics", "electronics", " ELECTRONICS "])
    def test_duplicate_title_rejected_ignoring_case(self, title):
        service, category_repo, _ = _setup()
        with pytest.raises(ValidationError, match="already exists"):
            service.create(title)
        assert category_repo.saved == []

    @pytest.mark.parametrize("title", ["Deleted", "no category"])
    def test_reserved_title_rejected(self, title):
        service, category_repo, _ = _setup()
        with pytest.raises(ValidationError, match="reserved"):
            service.create(title)
        assert category_repo.saved == []

    def test_reserved_title_rejected_even_without_sentinels(self):
        service, category_repo, _ = _setup(categories=[])
        with pytest.raises(ValidationError, match="reserved"):
            service.create("Deleted")
        assert category_repo.saved == []


class TestUpdate:

    def test_update(self):
        service, category_repo, _ = _setup()
        view = service.update(
            CategoryView(id=ELECTRONICS_ID, title="Updated Electronics", image_url="new.jpg")
        )
        assert view.title == "Updated Electronics"
        stored = category_repo.get_by_id(ELECTRONICS_ID)
        assert stored.title == "Updated Electronics"
        assert stored.image_url == "new.jpg"

    def test_update_same_title_different_case_is_not_a_collision(self):
        service, _, _ = _setup()
        view = service.update(CategoryView(id=ELECTRONICS_ID, title="ELECTRONICS"))
        assert view.title == "ELECTRONICS"

    def test_update_overwrites_image(self):
        service, category_repo, _ = _setup()
        service.update(CategoryView(id=ELECTRONICS_ID, title="Electronics"))
        assert category_repo.get_by_id(ELECTRONICS_ID).image_url is None

    def test_missing_id_rejected(self):
        service, category_repo, _ = _setup()
        with pytest.raises(ValidationError, match="ID is required"):
            service.update(CategoryView(title="Electronics"))
        assert category_repo.saved == []

    def test_missing_title_rejected(self):
        service, category_repo, _ = _setup()
        with pytest.raises(ValidationError, match="title is required"):
            service.update(CategoryView(id=ELECTRONICS_ID, title=None))
        assert category_repo.saved == []

    def test_unknown_category(self):
        service, category_repo, _ = _setup()
        with pytest.raises(CategoryNotFoundError):
            service.update(CategoryView(id=999, title="Whatever"))
        assert category_repo.saved == []

    def test_collision_leaves_store_unchanged(self):
        service, category_repo, _ = _setup()
        with pytest.raises(ValidationError, match="already exists"):
            service.update(CategoryView(id=ELECTRONICS_ID, title="clothing"))
        assert category_repo.saved == []
        assert category_repo.get_by_id(ELECTRONICS_ID).title == "Electronics"
        assert category_repo.get_by_id(CLOTHING_ID).title == "Clothing"

    def test_cannot_rename_onto_reserved_title(self):
        service, category_repo, _ = _setup(categories=_categories(with_sentinels=False))
        with pytest.raises(ValidationError, match="reserved"):
            service.update(CategoryView(id=ELECTRONICS_ID, title="Deleted"))
        assert category_repo.saved == []

    def test_cannot_rename_sentinel(self):
        service, category_repo, _ = _setup()
        with pytest.raises(ValidationError, match="cannot be renamed"):
            service.update(CategoryView(id=NO_CATEGORY_ID, title="Misc"))
        assert category_repo.get_by_id(NO_CATEGORY_ID).title == "No Category"

    def test_sentinel_image_can_change(self):
        service, category_repo, _ = _setup()
        service.update(CategoryView(id=DELETED_ID, title="Deleted", image_url="bin.png"))
        assert category_repo.get_by_id(DELETED_ID).image_url == "bin.png"


class TestUpdateById:

    def test_uses_argument_id_not_payload(self):
        service, category_repo, _ = _setup()
        view = service.update_by_id(
            ELECTRONICS_ID, CategoryView(id=CLOTHING_ID, title="Gadgets")
        )
        assert view.id == ELECTRONICS_ID
        assert category_repo.get_by_id(ELECTRONICS_ID).title == "Gadgets"
        assert category_repo.get_by_id(CLOTHING_ID).title == "Clothing"

    def test_missing_image_keeps_stored_image(self):
        service, category_repo, _ = _setup()
        service.update_by_id(ELECTRONICS_ID, CategoryView(title="Gadgets"))
        assert category_repo.get_by_id(ELECTRONICS_ID).image_url == "https://example.com/e.jpg"

    def test_missing_id_rejected(self):
        service, category_repo, _ = _setup()
        with pytest.raises(ValidationError, match="ID is required"):
            service.update_by_id(None, CategoryView(title="Gadgets"))
        assert category_repo.saved == []

    def test_blank_title_rejected(self):
        service, category_repo, _ = _setup()
        with pytest.raises(ValidationError, match="title is required"):
            service.update_by_id(ELECTRONICS_ID, CategoryView(title="  "))
        assert category_repo.saved == []

    def test_unknown_category(self):
        service, _, _ = _setup()
        with pytest.raises(CategoryNotFoundError):
            service.update_by_id(999, CategoryView(title="Gadgets"))

    def test_collision(self):
        service, category_repo, _ = _setup()
        with pytest.raises(ValidationError, match="already exists"):
            service.update_by_id(ELECTRONICS_ID, CategoryView(title="Clothing"))
        assert category_repo.saved == []


class TestDelete:

    def test_reassigns_products_then_deletes(self):
        service, category_repo, product_repo = _setup()
        electronics = category_repo.get_by_id(ELECTRONICS_ID)
        clothing = category_repo.get_by_id(CLOTHING_ID)
        for i in range(1, 4):
            product_repo.save(_product(i, electronics))
        product_repo.save(_product(4, clothing))

        service.delete_by_id(ELECTRONICS_ID)

        assert [p.id for p in product_repo.owned_by(NO_CATEGORY_ID)] == [1, 2, 3]
        assert [p.id for p in product_repo.owned_by(CLOTHING_ID)] == [4]
        assert product_repo.reassignments == [
            (ELECTRONICS_ID, category_repo.get_by_id(NO_CATEGORY_ID))
        ]
        assert category_repo.get_by_id(ELECTRONICS_ID) is None
        with pytest.raises(CategoryNotFoundError):
            service.get_by_id(ELECTRONICS_ID)

    def test_category_without_products(self):
        service, category_repo, product_repo = _setup()
        service.delete_by_id(CLOTHING_ID)
        assert category_repo.get_by_id(CLOTHING_ID) is None
        assert len(product_repo.reassignments) == 1

    def test_unknown_category(self):
        service, category_repo, product_repo = _setup()
        with pytest.raises(CategoryNotFoundError):
            service.delete_by_id(999)
        assert product_repo.reassignments == []
        assert category_repo.deleted == []

    @pytest.mark.parametrize("title", ["Deleted", "deleted", "DELETED", "No Category", "no CATEGORY"])
    def test_reserved_category_never_deleted(self, title):
        service, category_repo, product_repo = _setup(
            categories=[Category(id=7, title=title)]
        )
        with pytest.raises(ValidationError, match="cannot be deleted"):
            service.delete_by_id(7)
        assert product_repo.reassignments == []
        assert category_repo.deleted == []

    def test_missing_no_category_sentinel_is_inconsistent_state(self):
        service, category_repo, product_repo = _setup(
            categories=[Category(id=DELETED_ID, title="Deleted")] + _categories(False)
        )
        with capture_logs() as logs:
            with pytest.raises(InconsistentStateError, match="No Category"):
                service.delete_by_id(ELECTRONICS_ID)

        assert product_repo.reassignments == []
        assert category_repo.deleted == []
        assert category_repo.get_by_id(ELECTRONICS_ID) is not None
        assert [e["log_level"] for e in logs] == ["critical"]
        assert logs[0]["reserved_title"] == "No Category"

    def test_inconsistent_state_is_not_a_user_error(self):
        assert not issubclass(InconsistentStateError, ValidationError)
        assert not issubclass(InconsistentStateError, CategoryNotFoundError)


class TestTitleUniqueness:

    def test_holds_after_mixed_operations(self):
        service, category_repo, _ = _setup()
        books = service.create("Books")
        service.update_by_id(books.id, CategoryView(title="Novels"))
        service.create("books")
        for attempt in ("NOVELS", "electronics"):
            with pytest.raises(ValidationError):
                service.create(attempt)
        with pytest.raises(ValidationError):
            service.update_by_id(books.id, CategoryView(title="BOOKS"))

        folded = [t.casefold() for t in category_repo.titles()]
        assert len(folded) == len(set(folded))
