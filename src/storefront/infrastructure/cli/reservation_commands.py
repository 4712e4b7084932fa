"""CLI commands for table reservations."""

from __future__ import annotations

import click

from storefront.domain.model.reservation import ReservationRequest
from storefront.infrastructure.bootstrap import Storefront
from storefront.infrastructure.cli.common import ensure_ok, pass_storefront


@click.command("book")
@click.option("--date", "reservation_date", required=True, help="Date as YYYY-MM-DD.")
@click.option("--time", "reservation_time", required=True, help="Time as HH:MM.")
@click.option("--guests", type=int, default=2, show_default=True, help="Number of guests.")
@click.option("--name", default=None, help="Name for the booking.")
@click.option("--requests", "special_requests", default=None, help="Special requests.")
@pass_storefront
def reservation_book(
    storefront: Storefront,
    reservation_date: str,
    reservation_time: str,
    guests: int,
    name: str | None,
    special_requests: str | None,
) -> None:
    """Book a table."""
    request = ReservationRequest(
        guest_count=guests,
        reservation_date=reservation_date,
        reservation_time=reservation_time,
        guest_name=name,
        special_requests=special_requests,
    )
    result = ensure_ok(storefront.book_reservation.handle(request))
    click.echo(f"{result.message} (reservation #{result.data.id})")


@click.command("list")
@pass_storefront
def reservation_list(storefront: Storefront) -> None:
    """List your reservations."""
    reservations = ensure_ok(storefront.list_reservations.handle()).data
    if not reservations:
        click.echo("No reservations.")
        return
    click.echo(f"{'ID':<6} {'Date':<12} {'Time':<7} {'Guests':>6}  {'Status':<10}")
    click.echo("-" * 45)
    for r in reservations:
        click.echo(
            f"{r.id:<6} {r.reservation_date:<12} {r.reservation_time:<7} "
            f"{r.guest_count:>6}  {r.status.value:<10}"
        )


@click.command("cancel")
@click.option("--id", "reservation_id", required=True, type=int, help="Reservation ID.")
@pass_storefront
def reservation_cancel(storefront: Storefront, reservation_id: int) -> None:
    """Cancel a reservation."""
    click.echo(ensure_ok(storefront.cancel_reservation.handle(reservation_id)).message)
