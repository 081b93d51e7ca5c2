"""Abstract order store, keyed by order id."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pizzeria.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def ensure_schema(self) -> None:
        """Create the backing table if it does not exist yet (idempotent)."""

    @abstractmethod
    def get(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def put(self, order: Order) -> None:
        """Persist an order under its ID.

        Raises PersistenceError if the store is unavailable or the write fails.
        """
