"""Application service: a ready-to-submit example order (dev aid).

The payload can be POSTed to ``/order`` as-is.
"""

from __future__ import annotations

import uuid

from pizzeria.application.customize_pizza import CustomizePizzaHandler
from pizzeria.application.dto import json_number
from pizzeria.domain.model.pizza import PizzaCustomization, Toppings
from pizzeria.domain.service.pricing import calculate_price

EXAMPLE_PIZZA = PizzaCustomization(
    size="medium",
    crust="stuffed",
    sauce="regular",
    cheese="extra",
    toppings=Toppings(meats=("pepperoni",), vegetables=("mushrooms", "olives")),
)


class ExampleOrderHandler:

    def handle(self) -> dict:
        payload = CustomizePizzaHandler.quote(EXAMPLE_PIZZA).to_dict()
        payload["payment"] = {
            "token": f"pizza_payment_token_{uuid.uuid4()}",
            "amount": json_number(calculate_price(EXAMPLE_PIZZA)),
            "currency": "USD",
        }
        payload["customer"] = {
            "name": "Giorno",
            "customerId": f"customer_{uuid.uuid4()}",
            "email": "giorno@email.com",
        }
        return payload
