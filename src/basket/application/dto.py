"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BasketLineDTO:
    """Output: a single basket line as displayed to the user."""

    product_id: int
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$15.00"
    line_total: str
    stock: int
    out_of_stock: bool


@dataclass(frozen=True)
class BasketDTO:
    """Output: the whole basket as displayed to the user."""

    lines: list[BasketLineDTO]
    item_count: int
    sub_total: str


@dataclass(frozen=True)
class ProductDTO:
    id: int
    name: str
    price: str
    stock: int
