"""Application service: Add Product use case."""

from __future__ import annotations

from basket.domain.exceptions import ValidationError
from basket.domain.model.product import Product
from basket.domain.model.value_objects import Money
from basket.domain.repository.product_catalog import ProductCatalog


class AddProductHandler:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def handle(self, name: str, price: str, stock: int = 0) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = self._catalog.find_by_name(name.strip())
        if existing is not None:
            raise ValidationError(f"Product '{name}' already exists")

        # Auto-assign ID based on existing products
        all_products = self._catalog.list_all()
        next_id = max((p.id for p in all_products), default=0) + 1

        product = Product.create(
            id=next_id, name=name.strip(), price=Money.of(price), stock=stock,
        )
        self._catalog.save(product)
        return product
