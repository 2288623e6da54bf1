"""Process-local BasketStorage backed by a shared dict.

Plays the role of a session store: several instances created with the
same ``sessions`` mapping and basket ID see the same lines.
"""

from __future__ import annotations

from basket.domain.model.basket_line import BasketLine
from basket.domain.repository.basket_storage import BasketStorage


class InMemoryBasketStorage(BasketStorage):

    def __init__(
        self,
        basket_id: str,
        sessions: dict[str, dict[int, BasketLine]] | None = None,
    ) -> None:
        self._sessions = sessions if sessions is not None else {}
        self._basket_id = basket_id

    @property
    def _lines(self) -> dict[int, BasketLine]:
        return self._sessions.setdefault(self._basket_id, {})

    def set(self, product_id: int, line: BasketLine) -> None:
        self._lines[int(product_id)] = line

    def get(self, product_id: int) -> BasketLine | None:
        return self._lines.get(int(product_id))

    def exists(self, product_id: int) -> bool:
        return int(product_id) in self._lines

    def remove(self, product_id: int) -> None:
        self._lines.pop(int(product_id), None)

    def clear(self) -> None:
        self._sessions.pop(self._basket_id, None)

    def all(self) -> list[BasketLine]:
        return list(self._lines.values())
