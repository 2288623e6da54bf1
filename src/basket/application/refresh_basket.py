"""Application service: Refresh Basket use case.

Reconciles stored quantities with current stock, then returns the
basket as it now stands.
"""

from __future__ import annotations

from basket.application.basket_mapping import to_basket_dto
from basket.application.dto import BasketDTO
from basket.domain.service.basket import Basket


class RefreshBasketHandler:

    def __init__(self, basket: Basket) -> None:
        self._basket = basket

    def handle(self) -> BasketDTO:
        self._basket.refresh()
        return to_basket_dto(self._basket)
