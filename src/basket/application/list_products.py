"""Application service: List Products use case (query)."""

from __future__ import annotations

from basket.application.dto import ProductDTO
from basket.domain.repository.product_catalog import ProductCatalog


class ListProductsHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(self) -> list[ProductDTO]:
        return [
            ProductDTO(id=p.id, name=p.name, price=str(p.price), stock=p.stock)
            for p in self._catalog.list_all()
        ]
