"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI layers and the application layer
without exposing domain internals.  ``to_dict()`` yields the JSON shape
clients see.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class QuoteDTO:
    """Output: a customized pizza with its price and calories."""

    size: str
    crust: str | None
    sauce: str
    cheese: str
    toppings: dict
    price: str  # formatted, e.g. "13.99"
    calories: int | None

    def to_dict(self) -> dict:
        result: dict[str, Any] = {"size": self.size}
        if self.crust is not None:
            result["crust"] = self.crust
        result.update(
            sauce=self.sauce,
            cheese=self.cheese,
            toppings=self.toppings,
            price=self.price,
            calories=self.calories,
        )
        return result


@dataclass(frozen=True)
class OrderDTO:
    """Output: a placed order as returned to the client."""

    order_id: str
    status: str
    paid_amount: Decimal
    items: dict

    def to_dict(self) -> dict:
        return {
            "orderId": self.order_id,
            "status": self.status,
            "paidAmount": json_number(self.paid_amount),
            "items": self.items,
        }


def json_number(value: Decimal) -> int | float:
    """Render a Decimal as the JSON number a client would have sent."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)
