"""JSON-file-backed implementation of BasketStorage.

One file holds every basket. The top-level object is keyed by basket ID
and each basket maps a product ID (as a string, since JSON keys are
strings) to its line::

    {"default": {"1": {"product_id": 1, "quantity": 3}}}
"""

from __future__ import annotations

import json
from pathlib import Path

from basket.domain.model.basket_line import BasketLine
from basket.domain.repository.basket_storage import BasketStorage


class JsonBasketStorage(BasketStorage):

    def __init__(self, file_path: Path, basket_id: str) -> None:
        self._file_path = file_path
        self._basket_id = basket_id
        self._ensure_file()

    # --- BasketStorage interface ----------------------------------------------

    def set(self, product_id: int, line: BasketLine) -> None:
        baskets = self._load_raw()
        lines = baskets.setdefault(self._basket_id, {})
        lines[str(product_id)] = self._to_raw(line)
        self._persist_raw(baskets)

    def get(self, product_id: int) -> BasketLine | None:
        raw = self._lines().get(str(product_id))
        return self._to_domain(raw) if raw is not None else None

    def exists(self, product_id: int) -> bool:
        return str(product_id) in self._lines()

    def remove(self, product_id: int) -> None:
        baskets = self._load_raw()
        lines = baskets.get(self._basket_id, {})
        if lines.pop(str(product_id), None) is not None:
            self._persist_raw(baskets)

    def clear(self) -> None:
        baskets = self._load_raw()
        if baskets.pop(self._basket_id, None) is not None:
            self._persist_raw(baskets)

    def all(self) -> list[BasketLine]:
        return [self._to_domain(raw) for raw in self._lines().values()]

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(line: BasketLine) -> dict:
        return {"product_id": line.product_id, "quantity": line.quantity}

    @staticmethod
    def _to_domain(raw: dict) -> BasketLine:
        return BasketLine(
            product_id=int(raw["product_id"]),
            quantity=int(raw["quantity"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _lines(self) -> dict[str, dict]:
        return self._load_raw().get(self._basket_id, {})

    def _load_raw(self) -> dict[str, dict[str, dict]]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, baskets: dict[str, dict[str, dict]]) -> None:
        self._file_path.write_text(
            json.dumps(baskets, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
