"""Pizza customization — what the customer asked us to bake.

``validate_pizza()`` turns a decoded JSON body into a
``PizzaCustomization`` or raises ``InvalidPizzaError``.  Only presence and
shape are checked: size, sauce and cheese values are *not* matched against
the menu, so an unknown size gets through and is left to the pricing and
calorie engines to deal with.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pizzeria.domain.exceptions import InvalidPizzaError

RECOGNIZED_KEYS = frozenset({"size", "crust", "sauce", "cheese", "toppings"})
REQUIRED_KEYS = ("size", "sauce", "cheese")


@dataclass(frozen=True)
class Toppings:
    meats: tuple[str, ...] = ()
    vegetables: tuple[str, ...] = ()

    @property
    def count(self) -> int:
        return len(self.meats) + len(self.vegetables)

    def to_dict(self) -> dict:
        return {"meats": list(self.meats), "vegetables": list(self.vegetables)}


@dataclass(frozen=True)
class PizzaCustomization:
    size: str
    sauce: str
    cheese: str
    crust: str | None = None
    toppings: Toppings = field(default_factory=Toppings)


def validate_pizza(raw: Any) -> PizzaCustomization:
    """Validate a raw request body and build a PizzaCustomization.

    Keys other than the recognized pizza fields (``payment``, ``customer``
    and so on) are ignored here.
    """
    if not isinstance(raw, dict) or not RECOGNIZED_KEYS.intersection(raw):
        raise InvalidPizzaError("Invalid pizza provided.")

    for key in REQUIRED_KEYS:
        value = raw.get(key)
        if not isinstance(value, str) or not value:
            raise InvalidPizzaError("Invalid pizza provided.")

    crust = raw.get("crust")
    if crust is not None and not isinstance(crust, str):
        raise InvalidPizzaError("Invalid pizza provided.")

    return PizzaCustomization(
        size=raw["size"],
        sauce=raw["sauce"],
        cheese=raw["cheese"],
        crust=crust,
        toppings=_parse_toppings(raw.get("toppings")),
    )


def _parse_toppings(raw: Any) -> Toppings:
    if raw is None:
        return Toppings()
    if not isinstance(raw, dict):
        raise InvalidPizzaError("Invalid pizza provided.")
    return Toppings(
        meats=_parse_names(raw.get("meats")),
        vegetables=_parse_names(raw.get("vegetables")),
    )


def _parse_names(raw: Any) -> tuple[str, ...]:
    if raw is None:
        return ()
    if not isinstance(raw, list) or not all(isinstance(n, str) for n in raw):
        raise InvalidPizzaError("Invalid pizza provided.")
    return tuple(raw)
