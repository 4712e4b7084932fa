import click

from storefront.infrastructure.cli.auth_commands import (
    auth_login,
    auth_logout,
    auth_signup,
    auth_whoami,
    profile_update,
)
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from storefront.infrastructure.cli.common import CliState
from storefront.infrastructure.cli.engagement_commands import (
    notifications_list,
    notifications_read,
    reviews_add,
    reviews_latest,
    rewards_show,
)
from storefront.infrastructure.cli.menu_commands import menu_categories, menu_items
from storefront.infrastructure.cli.order_commands import order_history, order_place
from storefront.infrastructure.cli.reservation_commands import (
    reservation_book,
    reservation_cancel,
    reservation_list,
)
from storefront.infrastructure.cli.restaurant_commands import (
    restaurant_chefs,
    restaurant_gallery,
    restaurant_info,
)
from storefront.infrastructure.config import get_settings, setup_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Storefront: restaurant menu, cart and ordering client."""
    if ctx.obj is None:
        ctx.obj = CliState(settings=get_settings())
    setup_logging(debug=verbose or ctx.obj.settings.debug)


@cli.group()
def auth() -> None:
    """Sign in, sign up, sign out."""


@cli.group()
def profile() -> None:
    """Manage your profile."""


@cli.group()
def menu() -> None:
    """Browse the menu."""


@cli.group()
def cart() -> None:
    """Manage the cart."""


@cli.group()
def order() -> None:
    """Check out and see past orders."""


@cli.group()
def reservation() -> None:
    """Book tables."""


@cli.group()
def rewards() -> None:
    """Reward points."""


@cli.group()
def notifications() -> None:
    """Your inbox."""


@cli.group()
def reviews() -> None:
    """Read and write reviews."""


@cli.group()
def restaurant() -> None:
    """About the restaurant."""


# Register subcommands
auth.add_command(auth_login)
auth.add_command(auth_logout)
auth.add_command(auth_signup)
auth.add_command(auth_whoami)
profile.add_command(profile_update)
menu.add_command(menu_categories)
menu.add_command(menu_items)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
order.add_command(order_history)
order.add_command(order_place)
reservation.add_command(reservation_book)
reservation.add_command(reservation_cancel)
reservation.add_command(reservation_list)
rewards.add_command(rewards_show)
notifications.add_command(notifications_list)
notifications.add_command(notifications_read)
reviews.add_command(reviews_add)
reviews.add_command(reviews_latest)
restaurant.add_command(restaurant_chefs)
restaurant.add_command(restaurant_gallery)
restaurant.add_command(restaurant_info)
