import click

from medistore.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_set,
    cart_show,
)
from medistore.infrastructure.cli.catalog_commands import catalog_list, catalog_seed
from medistore.infrastructure.cli.order_commands import order_checkout, order_history, order_show
from medistore.infrastructure.cli.session_commands import session_login, session_logout, session_whoami
from medistore.infrastructure.config import get_settings
from medistore.utils.logging import configure_logging


@click.group()
@click.option("--log-level", default=None, help="Override MEDISTORE_LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """MediStore: pharmacy cart and checkout"""
    configure_logging(log_level or get_settings().log_level)


@cli.group()
def session() -> None:
    """Sign in and out."""


@cli.group()
def catalog() -> None:
    """Browse the medicine catalog."""


@cli.group()
def cart() -> None:
    """Manage your shopping cart."""


@cli.group()
def order() -> None:
    """Check out and review orders."""


# Register subcommands
session.add_command(session_login)
session.add_command(session_logout)
session.add_command(session_whoami)
catalog.add_command(catalog_list)
catalog.add_command(catalog_seed)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_set)
cart.add_command(cart_show)
order.add_command(order_checkout)
order.add_command(order_history)
order.add_command(order_show)
