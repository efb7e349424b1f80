"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from catalog.application.category_service import CategoryService
from catalog.application.product_service import ProductService
from catalog.infrastructure.config import Settings, get_settings
from catalog.infrastructure.persistence.json_category_repository import (
    JsonCategoryRepository,
)
from catalog.infrastructure.persistence.json_feature_flag_store import (
    JsonFeatureFlagStore,
)
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def category_repository(settings: Settings | None = None) -> JsonCategoryRepository:
    settings = settings or get_settings()
    return JsonCategoryRepository(settings.data_dir / "categories.json")


def product_repository(settings: Settings | None = None) -> JsonProductRepository:
    settings = settings or get_settings()
    return JsonProductRepository(
        settings.data_dir / "products.json",
        category_repo=category_repository(settings),
    )


def feature_flags(settings: Settings | None = None) -> JsonFeatureFlagStore:
    settings = settings or get_settings()
    return JsonFeatureFlagStore(
        settings.data_dir / "features.json",
        known_features=(settings.discount_feature,),
    )


def category_service(settings: Settings | None = None) -> CategoryService:
    settings = settings or get_settings()
    return CategoryService(
        category_repo=category_repository(settings),
        product_repo=product_repository(settings),
    )


def product_service(settings: Settings | None = None) -> ProductService:
    settings = settings or get_settings()
    return ProductService(
        product_repo=product_repository(settings),
        category_repo=category_repository(settings),
        feature_flags=feature_flags(settings),
        discount_feature=settings.discount_feature,
        discount_ratio=settings.discount_ratio,
    )
