"""In-memory fake repositories and request builders for testing.

The repositories implement the same abstract interface as the JSON
repository but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from pizzeria.domain.exceptions import PersistenceError
from pizzeria.domain.model.order import Order
from pizzeria.domain.repository.order_repository import OrderRepository


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[str, Order] = {}

    def ensure_schema(self) -> None:
        pass

    def get(self, order_id: str) -> Order | None:
        return self._store.get(order_id)

    def put(self, order: Order) -> None:
        self._store[order.order_id] = order

    def __len__(self) -> int:
        return len(self._store)


class UnavailableOrderRepository(OrderRepository):
    """A store that is down: every call fails."""

    def ensure_schema(self) -> None:
        raise PersistenceError("store unavailable")

    def get(self, order_id: str) -> Order | None:
        raise PersistenceError("store unavailable")

    def put(self, order: Order) -> None:
        raise PersistenceError("store unavailable")


# "pizza_payment_token_" (20 chars) + a 36-char UUID = 56 chars
VALID_TOKEN = "pizza_payment_token_0123abcd-0123-4abc-8def-0123456789ab"


def pizza_body(**overrides) -> dict:
    """A valid /customize body; keyword arguments replace fields."""
    body = {
        "size": "medium",
        "crust": "stuffed",
        "sauce": "regular",
        "cheese": "extra",
        "toppings": {"meats": ["pepperoni"], "vegetables": ["mushrooms", "olives"]},
    }
    body.update(overrides)
    return body


def order_body(payment: dict | None = None, **overrides) -> dict:
    """A valid /order body; ``payment`` replaces the payment block."""
    body = pizza_body(**overrides)
    if payment is None:
        payment = {"token": VALID_TOKEN, "amount": 16.28, "currency": "USD"}
    body["payment"] = payment
    return body
