"""Application service: Place Order use case.

Orchestrates validation, id generation and persistence.  Validation
failures are raised before an id is generated or the store is touched.
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, Callable

from pizzeria.application.dto import OrderDTO
from pizzeria.domain.model.order import Order
from pizzeria.domain.model.payment import validate_payment
from pizzeria.domain.model.pizza import validate_pizza
from pizzeria.domain.repository.order_repository import OrderRepository

log = logging.getLogger(__name__)


def _new_order_id() -> str:
    return str(uuid.uuid4())


class PlaceOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        id_factory: Callable[[], str] = _new_order_id,
    ) -> None:
        self._order_repo = order_repo
        self._id_factory = id_factory

    def handle(self, body: Any) -> OrderDTO:
        """Place an order for the pizza described by *body*.

        Steps:
        1. Validate the pizza fields.
        2. Validate the nested ``payment`` block.
        3. Build a confirmed Order under a fresh id.
        4. Persist and return a DTO.
        """
        validate_pizza(body)
        payment = validate_payment(body.get("payment"))

        order = Order.create(
            order_id=self._id_factory(),
            payment=payment,
            items=body,
        )

        log.info("Saving order %s...", order.order_id)
        self._order_repo.put(order)
        log.info("Saved order %s.", order.order_id)

        return to_dto(order)


def to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        order_id=order.order_id,
        status=order.status.value,
        paid_amount=order.paid_amount,
        items=order.items,
    )
