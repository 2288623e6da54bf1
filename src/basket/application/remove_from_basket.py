"""Application service: Remove From Basket use case."""

from __future__ import annotations

from basket.domain.repository.product_catalog import ProductCatalog
from basket.domain.service.basket import Basket


class RemoveFromBasketHandler:

    def __init__(self, basket: Basket, catalog: ProductCatalog) -> None:
        self._basket = basket
        self._catalog = catalog

    def handle(self, product_id: int) -> bool:
        """Remove a product's line. Returns False if it was not in the basket.

        Removing a product that is not in the basket is not an error.
        """
        product = self._catalog.find(product_id)
        if not self._basket.has(product):
            return False
        self._basket.remove(product)
        return True
