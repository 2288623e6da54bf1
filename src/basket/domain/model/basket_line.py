"""BasketLine: one product's presence in a basket."""

from __future__ import annotations

from dataclasses import dataclass

from basket.domain.exceptions import ValidationError


@dataclass(frozen=True)
class BasketLine:
    """A stored (product id, quantity) pair.

    A line with zero quantity never exists; the basket removes the line
    instead of storing it.
    """

    product_id: int
    quantity: int

    def __post_init__(self) -> None:
        if not isinstance(self.quantity, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity <= 0:
            raise ValidationError("Basket line quantity must be positive")
