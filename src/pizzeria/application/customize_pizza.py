"""Application service: Customize Pizza use case.

A preview only: validates the pizza and quotes price and calories.
Nothing is persisted.
"""

from __future__ import annotations

import logging
from typing import Any

from pizzeria.application.dto import QuoteDTO
from pizzeria.domain.model.pizza import PizzaCustomization, validate_pizza
from pizzeria.domain.service.calories import calculate_calories
from pizzeria.domain.service.pricing import calculate_price, format_price

log = logging.getLogger(__name__)


class CustomizePizzaHandler:

    def handle(self, body: Any) -> QuoteDTO:
        log.info("Validating pizza...")
        pizza = validate_pizza(body)
        log.info("Pizza validated successfully.")
        return self.quote(pizza)

    @staticmethod
    def quote(pizza: PizzaCustomization) -> QuoteDTO:
        return QuoteDTO(
            size=pizza.size,
            crust=pizza.crust,
            sauce=pizza.sauce,
            cheese=pizza.cheese,
            toppings=pizza.toppings.to_dict(),
            price=format_price(calculate_price(pizza)),
            calories=calculate_calories(pizza),
        )
