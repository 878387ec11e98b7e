"""CLI commands for checkout and order history."""

from __future__ import annotations

import click

from medistore.application.checkout import CheckoutHandler
from medistore.application.dto import OrderDTO
from medistore.application.list_orders import ListOrdersHandler
from medistore.application.show_order import ShowOrderHandler
from medistore.domain.exceptions import DomainException
from medistore.domain.model.order import ShippingDetails
from medistore.infrastructure.bootstrap import cart_session, identity_provider, order_repository


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Ship to:  {dto.ship_to}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        click.echo(
            f"  {item.name:<24} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Order Total':<31} {dto.total:>20}")


@click.command("checkout")
@click.option("--full-name", required=True, help="Recipient name.")
@click.option("--email", required=True, help="Contact email.")
@click.option("--address", required=True, help="Street address.")
@click.option("--city", required=True)
@click.option("--state", required=True)
@click.option("--zip", "zip_code", required=True, help="ZIP / PIN code.")
@click.option("--phone", required=True)
@click.option("--clear-cart", is_flag=True, default=False, help="Empty the cart once the order is placed.")
def order_checkout(
    full_name: str,
    email: str,
    address: str,
    city: str,
    state: str,
    zip_code: str,
    phone: str,
    clear_cart: bool,
) -> None:
    """Place an order for everything in your cart."""
    handler = CheckoutHandler(session=cart_session(), order_repo=order_repository())

    try:
        shipping = ShippingDetails(
            full_name=full_name,
            email=email,
            address=address,
            city=city,
            state=state,
            zip_code=zip_code,
            phone=phone,
        )
        dto = handler.handle(shipping, clear_cart=clear_cart)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} placed  (status={dto.status})")
    click.echo(f"Total: {dto.total}")


@click.command("history")
def order_history() -> None:
    """List your past orders, newest first."""
    handler = ListOrdersHandler(order_repo=order_repository(), identity=identity_provider())

    try:
        orders = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'Order':<22} {'Created':<22} {'Status':<12} {'Total':>12}")
    click.echo("-" * 71)
    for dto in orders:
        click.echo(f"{dto.id:<22} {dto.created_at:<22} {dto.status:<12} {dto.total:>12}")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of one of your orders."""
    handler = ShowOrderHandler(order_repo=order_repository(), identity=identity_provider())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
