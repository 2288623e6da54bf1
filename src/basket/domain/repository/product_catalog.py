"""Abstract catalog for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from basket.domain.model.product import Product


class ProductCatalog(ABC):

    @abstractmethod
    def find(self, product_id: int) -> Product:
        """Return a product by its ID.

        Raises EntityNotFoundError if the ID is unknown.
        """

    @abstractmethod
    def find_many(self, product_ids: Iterable[int]) -> list[Product]:
        """Return the products for the given IDs.

        Unknown IDs are dropped without error. Results come back in
        catalog order, not in the order the IDs were given.
        """

    @abstractmethod
    def find_by_name(self, name: str) -> Product | None:
        """Return a product by its exact name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""
