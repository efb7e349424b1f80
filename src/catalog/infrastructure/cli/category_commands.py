"""CLI commands for the Category aggregate."""

from __future__ import annotations

import click

from catalog.application.dto import CategoryView
from catalog.infrastructure.bootstrap import category_service
from catalog.infrastructure.cli.errors import reported_errors


@click.command("list")
def category_list() -> None:
    """List user categories."""
    categories = category_service().list_active()

    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"{'ID':<6} {'Title':<24} {'Image'}")
    click.echo("-" * 50)
    for c in categories:
        click.echo(f"{c.id:<6} {c.title:<24} {c.image_url or ''}")


@click.command("show")
@click.option("--id", "category_id", required=True, type=int, help="Category ID.")
def category_show(category_id: int) -> None:
    """Show a single category."""
    with reported_errors():
        view = category_service().get_by_id(category_id)

    click.echo(f"Category #{view.id}: {view.title}")
    if view.image_url:
        click.echo(f"Image: {view.image_url}")


@click.command("add")
@click.option("--title", required=True, help="Category title.")
@click.option("--image", "image_url", default=None, help="Image URL.")
def category_add(title: str, image_url: str | None) -> None:
    """Create a new category."""
    with reported_errors():
        view = category_service().create(title, image_url)

    click.echo(f"Category #{view.id} '{view.title}' created")


@click.command("update")
@click.option("--id", "category_id", required=True, type=int, help="Category ID.")
@click.option("--title", required=True, help="New title.")
@click.option("--image", "image_url", default=None, help="New image URL.")
def category_update(category_id: int, title: str, image_url: str | None) -> None:
    """Rename a category or change its image."""
    with reported_errors():
        view = category_service().update_by_id(
            category_id, CategoryView(title=title, image_url=image_url)
        )

    click.echo(f"Category #{view.id} updated to '{view.title}'")


@click.command("delete")
@click.option("--id", "category_id", required=True, type=int, help="Category ID.")
def category_delete(category_id: int) -> None:
    """Delete a category; its products move to 'No Category'."""
    with reported_errors():
        category_service().delete_by_id(category_id)

    click.echo(f"Category #{category_id} deleted.")
