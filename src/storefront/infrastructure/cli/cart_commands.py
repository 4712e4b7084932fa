"""CLI commands for the cart."""

from __future__ import annotations

import click

from storefront.application.dto import CartDTO
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import Storefront
from storefront.infrastructure.cli.common import pass_storefront


def _display_cart(dto: CartDTO) -> None:
    if not dto.lines:
        click.echo("Your cart is empty.")
        return
    click.echo(f"  {'ID':<5} {'Item':<24} {'Qty':>5} {'Price':>16} {'Total':>16}")
    click.echo(f"  {'-'*70}")
    for line in dto.lines:
        click.echo(
            f"  {line.item_id:<5} {line.title:<24} {line.quantity:>5} "
            f"{line.unit_price:>16} {line.line_total:>16}"
        )
    click.echo(f"  {'-'*70}")
    click.echo(f"  {'Subtotal (' + str(dto.count) + ' items)':<30} {dto.subtotal:>40}")


@click.command("show")
@pass_storefront
def cart_show(storefront: Storefront) -> None:
    """Show the cart."""
    _display_cart(CartDTO.from_cart(storefront.cart.snapshot()))


@click.command("add")
@click.option("--item", "item_id", required=True, type=int, help="Menu item ID.")
@click.option("--quantity", default=1, type=int, show_default=True, help="How many to add.")
@pass_storefront
def cart_add(storefront: Storefront, item_id: int, quantity: int) -> None:
    """Add a menu item to the cart."""
    try:
        item = storefront.menu.find_item(item_id)
        storefront.cart.add_to_cart(item, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added {quantity} x {item.title}. Cart: {storefront.cart.count} items, {storefront.cart.subtotal}")


@click.command("update")
@click.option("--item", "item_id", required=True, type=int, help="Menu item ID.")
@click.option("--quantity", required=True, type=int, help="New quantity (0 removes).")
@pass_storefront
def cart_update(storefront: Storefront, item_id: int, quantity: int) -> None:
    """Set the quantity of a cart line."""
    storefront.cart.update_quantity(item_id, quantity)
    _display_cart(CartDTO.from_cart(storefront.cart.snapshot()))


@click.command("remove")
@click.option("--item", "item_id", required=True, type=int, help="Menu item ID.")
@pass_storefront
def cart_remove(storefront: Storefront, item_id: int) -> None:
    """Remove a line from the cart."""
    storefront.cart.remove_from_cart(item_id)
    _display_cart(CartDTO.from_cart(storefront.cart.snapshot()))


@click.command("clear")
@pass_storefront
def cart_clear(storefront: Storefront) -> None:
    """Empty the cart."""
    storefront.cart.clear_cart()
    click.echo("Cart cleared.")
