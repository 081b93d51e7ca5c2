"""Calorie engine: base calories by size plus a fixed amount per topping."""

from __future__ import annotations

from pizzeria.domain.model.pizza import PizzaCustomization

SIZE_BASE_CALORIES = {
    "small": 1200,
    "medium": 1600,
    "large": 2200,
    "xlarge": 2600,
}
MEAT_CALORIES = 200
VEGETABLE_CALORIES = 25


def calculate_calories(pizza: PizzaCustomization) -> int | None:
    """Return total calories, or None when the size has no base value."""
    base = SIZE_BASE_CALORIES.get(pizza.size)
    if base is None:
        return None
    return (
        base
        + MEAT_CALORIES * len(pizza.toppings.meats)
        + VEGETABLE_CALORIES * len(pizza.toppings.vegetables)
    )
