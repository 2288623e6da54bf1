"""Application service: Set Stock use case.

Stock changes made here are not pushed to baskets. A basket picks them
up the next time it is refreshed or written to.
"""

from __future__ import annotations

from basket.domain.repository.product_catalog import ProductCatalog


class SetStockHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(self, product_id: int, stock: int) -> None:
        """Set the available stock for a product."""
        product = self._catalog.find(product_id)
        product.set_stock(stock)
        self._catalog.save(product)
