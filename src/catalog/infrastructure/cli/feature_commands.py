"""CLI commands for switching feature flags."""

from __future__ import annotations

import click
import structlog

from catalog.infrastructure.bootstrap import feature_flags

logger = structlog.get_logger()


@click.command("list")
def feature_list() -> None:
    """Show every known feature and whether it is enabled."""
    flags = feature_flags().list_all()

    click.echo(f"{'Feature':<20} {'Enabled':>8}")
    click.echo("-" * 29)
    for name, enabled in sorted(flags.items()):
        click.echo(f"{name:<20} {'yes' if enabled else 'no':>8}")


@click.command("set")
@click.argument("name")
@click.argument("state", type=click.Choice(["on", "off"], case_sensitive=False))
def feature_set(name: str, state: str) -> None:
    """Enable or disable a feature."""
    enabled = state.lower() == "on"
    feature_flags().set_active(name, enabled)
    logger.info("Feature toggled", feature=name, enabled=enabled)
    click.echo(f"Feature '{name}' {'enabled' if enabled else 'disabled'}.")
