import click

from catalog.infrastructure.cli.category_commands import (
    category_add,
    category_delete,
    category_list,
    category_show,
    category_update,
)
from catalog.infrastructure.cli.feature_commands import feature_list, feature_set
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from catalog.infrastructure.config import get_settings
from catalog.infrastructure.logging_config import configure_logging


@click.group()
def cli() -> None:
    """Catalog: categories, products and pricing."""
    settings = get_settings()
    configure_logging(settings.log_level, json_output=settings.log_json)


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def feature() -> None:
    """Manage feature flags."""


# Register subcommands
category.add_command(category_list)
category.add_command(category_show)
category.add_command(category_add)
category.add_command(category_update)
category.add_command(category_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_add)
product.add_command(product_update)
product.add_command(product_delete)
feature.add_command(feature_list)
feature.add_command(feature_set)
