"""Product aggregate.

Products are owned by the catalog. Their stock moves independently of
any basket: restocks, sales elsewhere and manual corrections all change
it, which is why baskets always re-read a product before trusting it.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from basket.domain.exceptions import ValidationError
from basket.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    ``quantity`` is not part of the catalog record. It is attached by the
    basket when a product is materialized as a basket line and is ignored
    for equality.
    """

    id: int
    name: str
    price: Money
    stock: int = 0
    quantity: int | None = field(default=None, compare=False)

    @classmethod
    def create(cls, id: int, name: str, price: Money, stock: int = 0) -> Product:
        """Factory method that validates a new catalog entry."""
        product = cls(id=id, name=name, price=price)
        product.update_price(price)
        product.set_stock(stock)
        return product

    def has_stock(self, quantity: int) -> bool:
        """True if ``quantity`` units can be taken from current stock."""
        return quantity <= self.stock

    def out_of_stock(self) -> bool:
        return self.stock == 0

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        Baskets hold no price snapshot, so the new price shows up in every
        subtotal computed afterwards.
        """
        if new_price.amount < 0:
            raise ValidationError("Product price cannot be negative")
        self.price = new_price

    def set_stock(self, stock: int) -> None:
        if stock < 0:
            raise ValidationError("Product stock cannot be negative")
        self.stock = stock
