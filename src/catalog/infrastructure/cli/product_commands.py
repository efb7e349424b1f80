"""CLI commands for the Product aggregate."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import click

from catalog.application.dto import CategoryView, ProductView
from catalog.infrastructure.bootstrap import product_service
from catalog.infrastructure.cli.errors import reported_errors


def _parse_price(ctx, param, value: str | None) -> Decimal | None:
    if value is None:
        return None
    try:
        price = Decimal(value)
    except InvalidOperation:
        raise click.BadParameter(f"Invalid price '{value}'.")
    if not price.is_finite():
        raise click.BadParameter(f"Invalid price '{value}'.")
    return price


def _display_product(view: ProductView) -> None:
    click.echo(f"Product #{view.id}: {view.title}")
    click.echo(f"SKU:      {view.sku}")
    click.echo(f"Price:    {view.price}")
    click.echo(f"Quantity: {view.quantity}")
    click.echo(f"Category: {view.category.title} (#{view.category.id})")
    click.echo(f"Image:    {view.image_url}")


@click.command("list")
def product_list() -> None:
    """List active products (discount applied when enabled)."""
    products = product_service().list_active()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Title':<20} {'SKU':<12} {'Price':>10} {'Qty':>6} {'Category'}")
    click.echo("-" * 72)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.title:<20} {p.sku:<12} {str(p.price):>10} "
            f"{p.quantity:>6} {p.category.title}"
        )


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_show(product_id: int) -> None:
    """Show a single active product."""
    with reported_errors():
        view = product_service().get_by_id(product_id)

    _display_product(view)


@click.command("add")
@click.option("--title", required=True, help="Product title.")
@click.option("--image", "image_url", required=True, help="Image URL.")
@click.option("--sku", required=True, help="Stock keeping unit.")
@click.option("--price", required=True, callback=_parse_price, help="Unit price (e.g. 15.00).")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option("--category-id", required=True, type=int, help="Owning category ID.")
def product_add(
    title: str,
    image_url: str,
    sku: str,
    price: Decimal,
    quantity: int,
    category_id: int,
) -> None:
    """Add a new product to the catalog."""
    view = ProductView(
        title=title,
        image_url=image_url,
        sku=sku,
        price=price,
        quantity=quantity,
        category=CategoryView(id=category_id),
    )
    with reported_errors():
        created = product_service().create(view)

    click.echo(f"Product #{created.id} '{created.title}' added at {created.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--title", default=None, help="New title.")
@click.option("--image", "image_url", default=None, help="New image URL.")
@click.option("--sku", default=None, help="New SKU.")
@click.option("--price", default=None, callback=_parse_price, help="New unit price.")
@click.option("--quantity", default=None, type=int, help="New stock level.")
@click.option("--category-id", default=None, type=int, help="Move to this category.")
def product_update(
    product_id: int,
    title: str | None,
    image_url: str | None,
    sku: str | None,
    price: Decimal | None,
    quantity: int | None,
    category_id: int | None,
) -> None:
    """Update the given fields of a product."""
    view = ProductView(
        title=title,
        image_url=image_url,
        sku=sku,
        price=price,
        quantity=quantity,
        category=CategoryView(id=category_id) if category_id is not None else None,
    )
    with reported_errors():
        product_service().update_by_id(product_id, view)

    click.echo(f"Product #{product_id} updated.")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_delete(product_id: int) -> None:
    """Soft-delete a product (moves it to the 'Deleted' category)."""
    with reported_errors():
        product_service().delete_by_id(product_id)

    click.echo(f"Product #{product_id} deleted.")
