"""Abstract keyed storage for basket lines.

An instance is bound to one basket scope (a session, a user, a named
basket). Keys are product IDs; there is at most one line per product.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from basket.domain.model.basket_line import BasketLine


class BasketStorage(ABC):

    @abstractmethod
    def set(self, product_id: int, line: BasketLine) -> None:
        """Insert or overwrite the line for a product."""

    @abstractmethod
    def get(self, product_id: int) -> BasketLine | None:
        """Return the line for a product, or None."""

    @abstractmethod
    def exists(self, product_id: int) -> bool:
        """Return True if the product has a line."""

    @abstractmethod
    def remove(self, product_id: int) -> None:
        """Delete the line for a product. Absent lines are ignored."""

    @abstractmethod
    def clear(self) -> None:
        """Delete every line in this basket."""

    @abstractmethod
    def all(self) -> list[BasketLine]:
        """Return every line in this basket, in no particular order."""
