"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from medistore.application.add_to_cart import AddToCartHandler
from medistore.application.cart_session import NOT_SIGNED_IN
from medistore.application.dto import CartDTO, MutationResult
from medistore.domain.exceptions import DomainException
from medistore.infrastructure.bootstrap import cart_session, product_repository


def _display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying a cart."""
    if not dto.items:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'ID':<6} {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*58}")
    for item in dto.items:
        click.echo(
            f"  {item.id:<6} {item.name:<24} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*58}")
    click.echo(f"  {'Cart Total':<37} {dto.total:>20}")


def _check(result: MutationResult) -> None:
    if not result.ok:
        raise click.ClickException(result.reason or "Cart update failed")


@click.command("show")
def cart_show() -> None:
    """Show the items in your cart."""
    session = cart_session()
    if session.user is None:
        raise click.ClickException(NOT_SIGNED_IN)
    _display_cart(CartDTO.from_domain(session.cart))


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID to add.")
def cart_add(product_id: str) -> None:
    """Add one unit of a product to your cart."""
    session = cart_session()
    handler = AddToCartHandler(session=session, product_repo=product_repository())

    try:
        _check(handler.handle(product_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_cart(CartDTO.from_domain(session.cart))


@click.command("set")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--qty", required=True, type=int, help="New quantity; 0 removes the item.")
def cart_set(product_id: str, qty: int) -> None:
    """Set the quantity of an item in your cart."""
    session = cart_session()
    _check(session.update_quantity(product_id, qty))
    _display_cart(CartDTO.from_domain(session.cart))


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID to remove.")
def cart_remove(product_id: str) -> None:
    """Remove an item from your cart."""
    session = cart_session()
    _check(session.remove_item(product_id))
    _display_cart(CartDTO.from_domain(session.cart))


@click.command("clear")
def cart_clear() -> None:
    """Empty your cart."""
    session = cart_session()
    if session.user is None:
        raise click.ClickException(NOT_SIGNED_IN)
    # Each invocation is a new session, so a local-only clear would be lost.
    _check(session.clear(persist=True))
    click.echo("Cart cleared.")
