"""The menu: every size, crust, sauce, cheese and topping we offer.

Built once at import time and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ToppingCatalog:
    meats: tuple[str, ...]
    vegetables: tuple[str, ...]


@dataclass(frozen=True)
class Catalog:
    sizes: tuple[str, ...]
    crusts: tuple[str, ...]
    sauces: tuple[str, ...]
    cheeses: tuple[str, ...]
    toppings: ToppingCatalog

    def to_dict(self) -> dict:
        return {
            "sizes": list(self.sizes),
            "crusts": list(self.crusts),
            "sauces": list(self.sauces),
            "cheeses": list(self.cheeses),
            "toppings": {
                "meats": list(self.toppings.meats),
                "vegetables": list(self.toppings.vegetables),
            },
        }


MENU = Catalog(
    sizes=("small", "medium", "large", "xlarge"),
    crusts=("regular", "thick", "thin", "stuffed"),
    sauces=("regular", "light", "extra", "alfredo"),
    cheeses=("regular", "extra", "none", "cheddar"),
    toppings=ToppingCatalog(
        meats=(
            "pepperoni",
            "italian sausage",
            "canadian bacon",
            "ham",
            "hamburger",
            "bacon",
            "chicken",
            "salami",
            "anchovies",
        ),
        vegetables=(
            "spinach",
            "peppers",
            "mushrooms",
            "olives",
            "tomatos",
            "onions",
            "jalapenos",
            "pineapple",
        ),
    ),
)
