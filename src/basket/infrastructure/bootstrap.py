"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from basket.domain.service.basket import Basket
from basket.infrastructure.config import get_settings
from basket.infrastructure.persistence.json_basket_storage import (
    JsonBasketStorage,
)
from basket.infrastructure.persistence.json_product_catalog import (
    JsonProductCatalog,
)


def product_catalog() -> JsonProductCatalog:
    return JsonProductCatalog(get_settings().products_file)


def basket_storage(basket_id: str | None = None) -> JsonBasketStorage:
    settings = get_settings()
    return JsonBasketStorage(settings.baskets_file, basket_id or settings.basket_id)


def make_basket(basket_id: str | None = None) -> tuple[Basket, JsonProductCatalog]:
    """Build a Basket for one basket scope, plus the catalog it reads from."""
    catalog = product_catalog()
    return Basket(basket_storage(basket_id), catalog), catalog
