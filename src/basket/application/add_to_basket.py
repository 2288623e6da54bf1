"""Application service: Add To Basket use case."""

from __future__ import annotations

from basket.domain.repository.product_catalog import ProductCatalog
from basket.domain.service.basket import Basket


class AddToBasketHandler:

    def __init__(self, basket: Basket, catalog: ProductCatalog) -> None:
        self._basket = basket
        self._catalog = catalog

    def handle(self, product_id: int, quantity: int) -> None:
        """Add units of a product, merging with any existing line."""
        product = self._catalog.find(product_id)
        self._basket.add(product, quantity)
