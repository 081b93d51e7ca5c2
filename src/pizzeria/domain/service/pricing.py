"""Pricing engine.

Price is driven by pizza area plus a flat charge per topping:

    price = pi * radius**2 / 11 + 2 * (toppings - 1) [+ 2 for extra cheese]

One topping is always free, and the discount is applied even when no
toppings were chosen, so a plain pizza costs 2 less than its base price.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

from pizzeria.domain.model.pizza import PizzaCustomization

SIZE_RADIUS = {
    "small": 5,
    "medium": 6,
    "large": 7,
    "xlarge": 8,
}
PRICE_DIVISOR = 11
PRICE_PER_TOPPING = 2
FREE_TOPPINGS = 1
EXTRA_CHEESE = "extra"

CENTS = Decimal("0.01")


def calculate_price(pizza: PizzaCustomization) -> Decimal:
    """Return the price rounded to cents.

    A size outside ``SIZE_RADIUS`` has no radius and prices as ``NaN``.
    """
    radius = SIZE_RADIUS.get(pizza.size)
    if radius is None:
        return Decimal("NaN")

    toppings_price = PRICE_PER_TOPPING * (pizza.toppings.count - FREE_TOPPINGS)
    if pizza.cheese == EXTRA_CHEESE:
        toppings_price += PRICE_PER_TOPPING

    base_price = math.pi * radius ** 2 / PRICE_DIVISOR
    return (Decimal(repr(base_price)) + toppings_price).quantize(
        CENTS, rounding=ROUND_HALF_UP
    )


def format_price(price: Decimal) -> str:
    """Fixed-point string with exactly two fractional digits, or 'NaN'."""
    if price.is_nan():
        return "NaN"
    return f"{price:.2f}"
