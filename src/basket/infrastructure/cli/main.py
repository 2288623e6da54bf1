import click

from basket.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_refresh,
    cart_remove,
    cart_show,
    cart_update,
)
from basket.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_price,
    product_stock,
)
from basket.infrastructure.config import get_settings
from basket.infrastructure.logging_setup import configure_logging


@click.group()
def cli() -> None:
    """Shopping basket with live stock checks."""
    configure_logging(get_settings().log_level)


@cli.group()
def cart() -> None:
    """Manage the shopping basket."""


@cli.group()
def product() -> None:
    """Manage the product catalog."""


# Register subcommands
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_refresh)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_price)
product.add_command(product_stock)
