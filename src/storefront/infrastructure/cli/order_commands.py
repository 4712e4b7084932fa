"""CLI commands for checkout and order history."""

from __future__ import annotations

import click

from storefront.domain.model.order import Order, OrderType
from storefront.infrastructure.bootstrap import Storefront
from storefront.infrastructure.cli.common import ensure_ok, pass_storefront

_ORDER_TYPES = {
    "delivery": OrderType.DELIVERY,
    "pickup": OrderType.PICKUP,
    "dine-in": OrderType.DINE_IN,
}


def _display_order(order: Order) -> None:
    click.echo(f"Order #{order.id}  (status={order.status.value})")
    if order.created_at:
        click.echo(f"Created:  {order.created_at}")
    for line in order.items:
        click.echo(f"  {line.title:<30} {line.quantity:>5} {str(line.price):>16}")
    click.echo(f"  {'Order Total':<36} {str(order.total_price):>16}")


@click.command("place")
@click.option(
    "--type", "order_type",
    type=click.Choice(sorted(_ORDER_TYPES), case_sensitive=False),
    default="delivery", show_default=True, help="How you get your food.",
)
@click.option("--phone", default=None, help="Contact number (defaults to your account's).")
@click.option("--address", default=None, help="Delivery address (delivery only).")
@click.option("--notes", default=None, help="Anything the kitchen should know.")
@pass_storefront
def order_place(
    storefront: Storefront,
    order_type: str,
    phone: str | None,
    address: str | None,
    notes: str | None,
) -> None:
    """Place an order for everything in the cart."""
    result = ensure_ok(
        storefront.place_order.handle(
            _ORDER_TYPES[order_type.lower()],
            contact_phone=phone,
            delivery_address=address,
            notes=notes,
        )
    )
    click.echo(result.message)
    if result.data is None:
        click.echo("Check `storefront order history` for the order details.")
        return
    _display_order(result.data)


@click.command("history")
@pass_storefront
def order_history(storefront: Storefront) -> None:
    """List your past orders."""
    orders = ensure_ok(storefront.order_history.handle()).data
    if not orders:
        click.echo("No orders yet.")
        return
    for order in orders:
        _display_order(order)
        click.echo()
