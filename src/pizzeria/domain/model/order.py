"""Order entity — a placed, paid pizza.

Orders are created once by ``Order.create()`` and never change afterwards;
there is no update or delete.  ``items`` keeps the request body exactly as
the customer submitted it, payment block included.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from pizzeria.domain.model.payment import PaymentInfo


class OrderStatus(Enum):
    CONFIRMED = "confirmed"


@dataclass(frozen=True)
class Order:
    """Use ``Order.create()`` for new orders.

    The plain constructor exists so the store can reconstitute persisted
    orders without re-running validation.
    """

    order_id: str
    status: OrderStatus
    paid_amount: Decimal
    items: dict

    @staticmethod
    def create(order_id: str, payment: PaymentInfo, items: dict) -> Order:
        return Order(
            order_id=order_id,
            status=OrderStatus.CONFIRMED,
            paid_amount=payment.amount,
            items=copy.deepcopy(items),
        )
