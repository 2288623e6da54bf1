"""Application service: Update Product use case."""

from __future__ import annotations

from basket.domain.model.value_objects import Money
from basket.domain.repository.product_catalog import ProductCatalog


class UpdateProductHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(self, product_id: int, new_price: str) -> None:
        """Update a product's price.

        Baskets keep no price snapshot, so every subtotal computed after
        this call uses the new price.
        """
        product = self._catalog.find(product_id)
        product.update_price(Money.of(new_price))
        self._catalog.save(product)
