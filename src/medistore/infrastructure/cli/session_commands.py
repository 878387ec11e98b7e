"""CLI commands for signing in and out."""

from __future__ import annotations

import click

from medistore.domain.exceptions import DomainException
from medistore.infrastructure.bootstrap import identity_provider


@click.command("login")
@click.option("--uid", required=True, help="User id.")
@click.option("--email", default=None, help="Email address.")
def session_login(uid: str, email: str | None) -> None:
    """Sign in as a user."""
    try:
        user = identity_provider().sign_in(uid, email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Signed in as {user.uid}")


@click.command("logout")
def session_logout() -> None:
    """Sign out."""
    identity_provider().sign_out()
    click.echo("Signed out.")


@click.command("whoami")
def session_whoami() -> None:
    """Show the signed-in user."""
    user = identity_provider().current_user()
    if user is None:
        click.echo("Not signed in.")
        return
    click.echo(f"{user.uid}" + (f" <{user.email}>" if user.email else ""))
