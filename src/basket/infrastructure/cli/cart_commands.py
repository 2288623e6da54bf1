"""CLI commands for the shopping basket."""

from __future__ import annotations

import click

from basket.application.add_to_basket import AddToBasketHandler
from basket.application.clear_basket import ClearBasketHandler
from basket.application.dto import BasketDTO
from basket.application.refresh_basket import RefreshBasketHandler
from basket.application.remove_from_basket import RemoveFromBasketHandler
from basket.application.show_basket import ShowBasketHandler
from basket.application.update_basket import UpdateBasketHandler
from basket.domain.exceptions import DomainException
from basket.infrastructure.bootstrap import make_basket

basket_option = click.option(
    "--basket", "basket_id", default=None,
    help="Basket to operate on (defaults to BASKET_BASKET_ID).",
)


def _display_basket(dto: BasketDTO) -> None:
    """Shared formatting for displaying a basket."""
    if not dto.lines:
        click.echo("Basket is empty.")
        return

    click.echo(f"  {'ID':<6} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*54}")
    for line in dto.lines:
        note = "  (out of stock)" if line.out_of_stock else ""
        click.echo(
            f"  {line.product_id:<6} {line.product_name:<20} {line.quantity:>5} "
            f"{line.unit_price:>10} {line.line_total:>10}{note}"
        )
    click.echo(f"  {'-'*54}")
    click.echo(f"  {'Items':<27} {dto.item_count:>27}")
    click.echo(f"  {'Subtotal':<27} {dto.sub_total:>27}")


@click.command("add")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", default=1, show_default=True, type=int, help="Units to add.")
@basket_option
def cart_add(product_id: int, quantity: int, basket_id: str | None) -> None:
    """Add a product to the basket."""
    svc, catalog = make_basket(basket_id)
    handler = AddToBasketHandler(basket=svc, catalog=catalog)

    try:
        handler.handle(product_id=product_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Added {quantity} x product #{product_id}")


@click.command("update")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity (0 removes).")
@basket_option
def cart_update(product_id: int, quantity: int, basket_id: str | None) -> None:
    """Set the quantity of a product in the basket."""
    svc, catalog = make_basket(basket_id)
    handler = UpdateBasketHandler(basket=svc, catalog=catalog)

    try:
        handler.handle(product_id=product_id, quantity=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if quantity == 0:
        click.echo(f"Product #{product_id} removed from basket")
    else:
        click.echo(f"Product #{product_id} quantity set to {quantity}")


@click.command("remove")
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@basket_option
def cart_remove(product_id: int, basket_id: str | None) -> None:
    """Remove a product from the basket."""
    svc, catalog = make_basket(basket_id)
    handler = RemoveFromBasketHandler(basket=svc, catalog=catalog)

    try:
        removed = handler.handle(product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if removed:
        click.echo(f"Product #{product_id} removed from basket")
    else:
        click.echo(f"Product #{product_id} was not in the basket")


@click.command("show")
@basket_option
def cart_show(basket_id: str | None) -> None:
    """Show the basket contents and subtotal."""
    svc, _ = make_basket(basket_id)

    try:
        dto = ShowBasketHandler(basket=svc).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_basket(dto)


@click.command("refresh")
@basket_option
def cart_refresh(basket_id: str | None) -> None:
    """Reconcile basket quantities with current stock."""
    svc, _ = make_basket(basket_id)

    try:
        dto = RefreshBasketHandler(basket=svc).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_basket(dto)


@click.command("clear")
@basket_option
def cart_clear(basket_id: str | None) -> None:
    """Remove every product from the basket."""
    svc, _ = make_basket(basket_id)
    count = ClearBasketHandler(basket=svc).handle()
    click.echo(f"Basket cleared ({count} line(s) removed)")
