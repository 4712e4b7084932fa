"""CLI commands for the restaurant's public pages."""

from __future__ import annotations

import click

from storefront.infrastructure.bootstrap import Storefront
from storefront.infrastructure.cli.common import ensure_ok, pass_storefront


@click.command("info")
@pass_storefront
def restaurant_info(storefront: Storefront) -> None:
    """Show address, opening hours and contact details."""
    result = ensure_ok(storefront.restaurant.info())
    info = result.data
    if info is None:
        click.echo(result.message)
        return
    click.echo(info.name)
    click.echo(f"Address:  {info.address}")
    click.echo(f"Phone:    {info.phone}")
    if info.email:
        click.echo(f"Email:    {info.email}")
    if info.opening_hours:
        click.echo(f"Hours:    {info.opening_hours}")
    if info.map_url:
        click.echo(f"Map:      {info.map_url}")
    links = {
        "Facebook": info.facebook_url,
        "Instagram": info.instagram_url,
        "Uber Eats": info.uber_eats_url,
        "PickMe Food": info.pickme_food_url,
    }
    for label, url in links.items():
        if url:
            click.echo(f"{label + ':':<10}{url}")
    if info.about_us:
        click.echo()
        click.echo(info.about_us)


@click.command("chefs")
@pass_storefront
def restaurant_chefs(storefront: Storefront) -> None:
    """Meet the kitchen team."""
    chefs = ensure_ok(storefront.restaurant.chefs()).data
    if not chefs:
        click.echo("No chefs listed.")
        return
    for chef in chefs:
        click.echo(f"{chef.name:<24} {chef.title or ''}")
        if chef.bio:
            click.echo(f"    {chef.bio}")


@click.command("gallery")
@pass_storefront
def restaurant_gallery(storefront: Storefront) -> None:
    """List gallery photos."""
    images = ensure_ok(storefront.restaurant.gallery()).data
    if not images:
        click.echo("The gallery is empty.")
        return
    for image in images:
        click.echo(f"#{image.id:<5} {image.image_url}  {image.caption or ''}".rstrip())
