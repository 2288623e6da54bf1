"""Application service: Clear Basket use case."""

from __future__ import annotations

from basket.domain.service.basket import Basket


class ClearBasketHandler:

    def __init__(self, basket: Basket) -> None:
        self._basket = basket

    def handle(self) -> int:
        """Empty the basket and return how many lines were dropped."""
        count = self._basket.item_count()
        self._basket.clear()
        return count
