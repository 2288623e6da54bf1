"""CLI commands for the product catalog."""

from __future__ import annotations

import click

from basket.application.add_product import AddProductHandler
from basket.application.list_products import ListProductsHandler
from basket.application.set_stock import SetStockHandler
from basket.application.update_product import UpdateProductHandler
from basket.domain.exceptions import DomainException
from basket.infrastructure.bootstrap import product_catalog


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--stock", default=0, show_default=True, type=int, help="Units in stock.")
def product_add(name: str, price: str, stock: int) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(catalog=product_catalog())

    try:
        product = handler.handle(name=name, price=price, stock=stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} '{product.name}' added at {product.price} "
        f"({product.stock} in stock)"
    )


@click.command("list")
def product_list() -> None:
    """List all products in the catalog."""
    products = ListProductsHandler(catalog=product_catalog()).handle()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>8}")
    click.echo("-" * 47)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>10} {p.stock:>8}")


@click.command("price")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
def product_price(product_id: int, price: str) -> None:
    """Update a product's price."""
    handler = UpdateProductHandler(catalog=product_catalog())

    try:
        handler.handle(product_id=product_id, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} price updated to ${price}")


@click.command("stock")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--stock", required=True, type=int, help="Units in stock.")
def product_stock(product_id: int, stock: int) -> None:
    """Set a product's stock level."""
    handler = SetStockHandler(catalog=product_catalog())

    try:
        handler.handle(product_id=product_id, stock=stock)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} stock set to {stock}")
