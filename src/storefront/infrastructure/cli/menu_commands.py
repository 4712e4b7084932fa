"""CLI commands for browsing the menu."""

from __future__ import annotations

import click

from storefront.infrastructure.bootstrap import Storefront
from storefront.infrastructure.cli.common import ensure_ok, pass_storefront


@click.command("categories")
@pass_storefront
def menu_categories(storefront: Storefront) -> None:
    """List menu categories."""
    categories = ensure_ok(storefront.menu.categories()).data
    if not categories:
        click.echo("No categories found.")
        return
    click.echo(f"{'ID':<6} {'Name':<30}")
    click.echo("-" * 37)
    for c in categories:
        click.echo(f"{c.id:<6} {c.name:<30}")


@click.command("items")
@click.option("--category", "category_id", type=int, default=None, help="Only this category.")
@click.option("--popular", is_flag=True, default=False, help="Only popular items.")
@pass_storefront
def menu_items(storefront: Storefront, category_id: int | None, popular: bool) -> None:
    """List menu items."""
    items = ensure_ok(storefront.menu.items(category_id=category_id, popular=popular)).data
    if not items:
        click.echo("No menu items found.")
        return
    click.echo(f"{'ID':<6} {'Title':<30} {'Price':>16}")
    click.echo("-" * 54)
    for item in items:
        suffix = "" if item.is_available else "  (unavailable)"
        click.echo(f"{item.id:<6} {item.title:<30} {str(item.price):>16}{suffix}")
