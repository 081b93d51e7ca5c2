"""Application service: Show Order use case (query).

An unknown id is not an error: the handler returns None and the caller
decides how to present a missing order.
"""

from __future__ import annotations

import logging

from pizzeria.application.dto import OrderDTO
from pizzeria.application.place_order import to_dto
from pizzeria.domain.repository.order_repository import OrderRepository

log = logging.getLogger(__name__)


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> OrderDTO | None:
        order = self._order_repo.get(order_id)
        if order is None:
            log.info("Order %s not found", order_id)
            return None
        return to_dto(order)
