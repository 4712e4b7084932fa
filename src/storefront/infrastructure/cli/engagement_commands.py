"""CLI commands for rewards, the inbox and reviews."""

from __future__ import annotations

import click

from storefront.domain.model.engagement import ReviewRequest
from storefront.infrastructure.bootstrap import Storefront
from storefront.infrastructure.cli.common import ensure_ok, pass_storefront


@click.command("show")
@pass_storefront
def rewards_show(storefront: Storefront) -> None:
    """Show your reward points."""
    rewards = ensure_ok(storefront.rewards.handle()).data
    click.echo(f"Total points: {rewards.total_points}")
    for tx in rewards.history:
        click.echo(f"  {tx.created_at or '':<22} {tx.transaction_type:<10} {tx.points:>6}  {tx.description or ''}")


@click.command("list")
@pass_storefront
def notifications_list(storefront: Storefront) -> None:
    """Show your inbox."""
    result = ensure_ok(storefront.notifications.inbox())
    if not result.data:
        click.echo("Inbox is empty.")
        return
    click.echo(result.message)
    for n in result.data:
        marker = " " if n.is_read else "*"
        click.echo(f"{marker} #{n.id:<5} {n.title}")
        click.echo(f"         {n.message}")


@click.command("read")
@click.option("--id", "notification_id", required=True, type=int, help="Notification ID.")
@pass_storefront
def notifications_read(storefront: Storefront, notification_id: int) -> None:
    """Mark a notification as read."""
    click.echo(ensure_ok(storefront.notifications.mark_read(notification_id)).message)


@click.command("latest")
@pass_storefront
def reviews_latest(storefront: Storefront) -> None:
    """Show the latest reviews."""
    reviews = ensure_ok(storefront.reviews.latest()).data
    if not reviews:
        click.echo("No reviews yet.")
        return
    for r in reviews:
        stars = "*" * r.rating
        click.echo(f"{stars:<5} {r.reviewer_name or 'Anonymous'}: {r.comment or ''}")


@click.command("add")
@click.option("--rating", required=True, type=click.IntRange(1, 5), help="1 to 5 stars.")
@click.option("--comment", required=True, help="Your review.")
@click.option("--name", default=None, help="Name to show with the review.")
@pass_storefront
def reviews_add(storefront: Storefront, rating: int, comment: str, name: str | None) -> None:
    """Write a review."""
    request = ReviewRequest(rating=rating, comment=comment, reviewer_name=name)
    click.echo(ensure_ok(storefront.reviews.add(request)).message)
