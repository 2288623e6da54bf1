"""Application service: Update Basket use case.

Sets an absolute quantity; zero removes the product from the basket.
"""

from __future__ import annotations

from basket.domain.repository.product_catalog import ProductCatalog
from basket.domain.service.basket import Basket


class UpdateBasketHandler:

    def __init__(self, basket: Basket, catalog: ProductCatalog) -> None:
        self._basket = basket
        self._catalog = catalog

    def handle(self, product_id: int, quantity: int) -> None:
        product = self._catalog.find(product_id)
        self._basket.update(product, quantity)
