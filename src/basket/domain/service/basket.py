"""Domain service: Basket.

Coordinates the basket's line storage with the product catalog. The
basket owns no state of its own; every read goes to the storage and
every stock decision goes to the catalog.

Stock is mutable outside the basket, so stored quantities can go stale.
Writes are always checked against a freshly loaded product, and
``refresh()`` clamps stale lines down to current stock on demand.
"""

from __future__ import annotations

import dataclasses
import logging
from contextlib import AbstractContextManager, nullcontext

from basket.domain.exceptions import QuantityExceededError, ValidationError
from basket.domain.model.basket_line import BasketLine
from basket.domain.model.product import Product
from basket.domain.model.value_objects import Money
from basket.domain.repository.basket_storage import BasketStorage
from basket.domain.repository.product_catalog import ProductCatalog

logger = logging.getLogger(__name__)


class Basket:
    """Shopping basket over an injected storage and catalog.

    ``lock`` guards the stock check and the storage write in
    :meth:`update`, and the read, merge and write in :meth:`add`, as one
    step each. Pass a lock shared by every Basket bound
    to the same storage scope when several threads can write to it.
    """

    def __init__(
        self,
        storage: BasketStorage,
        catalog: ProductCatalog,
        lock: AbstractContextManager | None = None,
    ) -> None:
        self._storage = storage
        self._catalog = catalog
        self._lock = lock if lock is not None else nullcontext()

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product, quantity: int) -> None:
        """Add ``quantity`` units of a product.

        If the product is already in the basket the quantities are merged,
        and the merged total goes through the same stock check as
        :meth:`update`. The read and the write happen under one hold of
        the lock.
        """
        with self._lock:
            line = self.get(product)
            if line is not None:
                quantity = line.quantity + quantity

            self._set_quantity(product, quantity)

    def update(self, product: Product, quantity: int) -> None:
        """Set the basket quantity of a product.

        The product is re-read from the catalog by ID; stock carried on the
        passed-in object is never trusted. A quantity of zero removes the
        line.

        Raises QuantityExceededError if current stock cannot cover
        ``quantity``, and ValidationError if ``quantity`` is negative; the
        stored line is left untouched in both cases.
        """
        with self._lock:
            self._set_quantity(product, quantity)

    def _set_quantity(self, product: Product, quantity: int) -> None:
        # Caller holds the lock.
        if quantity < 0:
            raise ValidationError(
                f"Basket quantity cannot be negative, got {quantity}"
            )

        fresh = self._catalog.find(product.id)
        if not fresh.has_stock(quantity):
            logger.warning(
                "Rejected quantity %d for product #%s (stock %d)",
                quantity, fresh.id, fresh.stock,
            )
            raise QuantityExceededError(fresh.id, quantity, fresh.stock)

        if quantity == 0:
            self.remove(product)
            return

        self._storage.set(
            product.id,
            BasketLine(product_id=int(product.id), quantity=int(quantity)),
        )
        logger.debug("Stored product #%s with quantity %d", product.id, quantity)

    def remove(self, product: Product) -> None:
        self._storage.remove(product.id)
        logger.debug("Removed product #%s", product.id)

    def clear(self) -> None:
        self._storage.clear()

    def refresh(self) -> None:
        """Clamp every line whose quantity exceeds current stock.

        Lines of products that ran out of stock are removed. Lines updated
        before a failure stay updated.
        """
        for item in self.all():
            if not item.has_stock(item.quantity):
                logger.info(
                    "Clamping product #%s from %d to %d",
                    item.id, item.quantity, item.stock,
                )
                self.update(item, item.stock)

    # --- Queries --------------------------------------------------------------

    def has(self, product: Product) -> bool:
        return self._storage.exists(product.id)

    def get(self, product: Product) -> BasketLine | None:
        return self._storage.get(product.id)

    def all(self) -> list[Product]:
        """Return the basket contents as products with ``quantity`` set.

        Products are batch-loaded from the catalog and come back in catalog
        order. A line whose product the catalog no longer knows is left out
        of the result but stays in storage.
        """
        ids = [line.product_id for line in self._storage.all()]

        items: list[Product] = []
        for product in self._catalog.find_many(ids):
            line = self.get(product)
            if line is None:
                continue
            items.append(dataclasses.replace(product, quantity=line.quantity))
        return items

    def item_count(self) -> int:
        """Number of distinct products in the basket."""
        return len(self._storage.all())

    def sub_total(self) -> Money:
        """Sum of price times quantity, skipping out-of-stock products."""
        in_stock = [item for item in self.all() if not item.out_of_stock()]
        if not in_stock:
            return Money.zero()

        total = Money.zero(in_stock[0].price.currency)
        for item in in_stock:
            total = total + item.price * item.quantity
        return total
