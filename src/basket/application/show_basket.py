"""Application service: Show Basket use case (query)."""

from __future__ import annotations

from basket.application.basket_mapping import to_basket_dto
from basket.application.dto import BasketDTO
from basket.domain.service.basket import Basket


class ShowBasketHandler:

    def __init__(self, basket: Basket) -> None:
        self._basket = basket

    def handle(self) -> BasketDTO:
        return to_basket_dto(self._basket)
