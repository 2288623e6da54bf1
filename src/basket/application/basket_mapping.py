"""Shared Basket -> BasketDTO mapping for the basket query handlers."""

from __future__ import annotations

from basket.application.dto import BasketDTO, BasketLineDTO
from basket.domain.service.basket import Basket


def to_basket_dto(basket: Basket) -> BasketDTO:
    return BasketDTO(
        lines=[
            BasketLineDTO(
                product_id=item.id,
                product_name=item.name,
                quantity=item.quantity,  # type: ignore[arg-type]
                unit_price=str(item.price),
                line_total=str(item.price * item.quantity),  # type: ignore[operator]
                stock=item.stock,
                out_of_stock=item.out_of_stock(),
            )
            for item in basket.all()
        ],
        item_count=basket.item_count(),
        sub_total=str(basket.sub_total()),
    )
