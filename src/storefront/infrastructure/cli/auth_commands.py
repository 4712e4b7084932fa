"""CLI commands for signing in and out."""

from __future__ import annotations

import click

from storefront.domain.model.session import Registration
from storefront.infrastructure.bootstrap import Storefront
from storefront.infrastructure.cli.common import ensure_ok, pass_storefront


@click.command("login")
@click.option("--phone", required=True, help="Phone number of the account.")
@click.option("--password", prompt=True, hide_input=True, help="Account password.")
@pass_storefront
def auth_login(storefront: Storefront, phone: str, password: str) -> None:
    """Sign in with phone number and password."""
    result = ensure_ok(storefront.session.sign_in(phone, password))
    click.echo(f"{result.message}. Welcome, {result.data.name or result.data.phone_number}!")


@click.command("signup")
@click.option("--phone", required=True, help="Phone number for the new account.")
@click.option("--name", default=None, help="Display name.")
@click.option("--email", default=None, help="Email address.")
@click.option("--password", prompt=True, hide_input=True, help="Password (min 6 characters).")
@click.option("--confirm-password", prompt=True, hide_input=True, help="Repeat the password.")
@pass_storefront
def auth_signup(
    storefront: Storefront,
    phone: str,
    name: str | None,
    email: str | None,
    password: str,
    confirm_password: str,
) -> None:
    """Create an account and sign in."""
    registration = Registration(
        phone_number=phone,
        password=password,
        confirm_password=confirm_password,
        name=name,
        email=email,
    )
    result = ensure_ok(storefront.session.sign_up(registration))
    click.echo(result.message)


@click.command("logout")
@pass_storefront
def auth_logout(storefront: Storefront) -> None:
    """Sign out of this device."""
    storefront.session.sign_out()
    click.echo("Signed out.")


@click.command("whoami")
@pass_storefront
def auth_whoami(storefront: Storefront) -> None:
    """Show who is signed in."""
    session = storefront.session.session
    if not session.is_authenticated:
        click.echo("Guest (not signed in)")
        return
    user = session.user
    click.echo(f"User #{user.id}  {user.name or '-'}  ({user.role.value})")
    click.echo(f"Phone: {user.phone_number}")
    if user.email:
        click.echo(f"Email: {user.email}")


@click.command("update")
@click.option("--name", default=None, help="New display name.")
@click.option("--email", default=None, help="New email address.")
@pass_storefront
def profile_update(storefront: Storefront, name: str | None, email: str | None) -> None:
    """Edit your profile."""
    changes = {k: v for k, v in {"name": name, "email": email}.items() if v is not None}
    if not changes:
        raise click.UsageError("Nothing to update; pass --name and/or --email.")
    result = ensure_ok(storefront.session.update_profile(changes))
    click.echo(result.message)
