"""JSON-file-backed implementation of OrderRepository.

The file holds a single JSON object keyed by order id.  Writes replace the
whole file atomically; a lock serializes the read-modify-write cycle so
concurrent puts of different orders do not lose each other.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from decimal import Decimal
from pathlib import Path

from pizzeria.domain.exceptions import PersistenceError
from pizzeria.domain.model.order import Order, OrderStatus
from pizzeria.domain.repository.order_repository import OrderRepository

log = logging.getLogger(__name__)


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.Lock()

    # --- OrderRepository interface --------------------------------------------

    def ensure_schema(self) -> None:
        with self._lock:
            if self._file_path.exists():
                log.info("Orders store found at %s", self._file_path)
                return
            log.info("Orders store does not exist. Creating %s", self._file_path)
            try:
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_path.write_text("{}", encoding="utf-8")
            except OSError as exc:
                raise PersistenceError(f"Cannot create orders store: {exc}") from exc

    def get(self, order_id: str) -> Order | None:
        raw = self._load_raw().get(order_id)
        if raw is None:
            return None
        return self._to_domain(raw)

    def put(self, order: Order) -> None:
        with self._lock:
            orders = self._load_raw()
            orders[order.order_id] = self._to_raw(order)
            self._persist_raw(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "orderId": order.order_id,
            "status": order.status.value,
            "paidAmount": str(order.paid_amount),
            "items": order.items,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        return Order(
            order_id=raw["orderId"],
            status=OrderStatus(raw["status"]),
            paid_amount=Decimal(raw["paidAmount"]),
            items=raw["items"],
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, dict]:
        try:
            orders = json.loads(self._file_path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise PersistenceError(
                f"Orders store {self._file_path} does not exist"
            ) from exc
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"Cannot read orders store: {exc}") from exc
        if not isinstance(orders, dict):
            raise PersistenceError(f"Orders store {self._file_path} is corrupt")
        return orders

    def _persist_raw(self, orders: dict[str, dict]) -> None:
        try:
            payload = json.dumps(orders, indent=2) + "\n"
        except (TypeError, ValueError) as exc:
            raise PersistenceError(f"Order is not serializable: {exc}") from exc
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self._file_path.parent, prefix=".orders-", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, self._file_path)
        except OSError as exc:
            raise PersistenceError(f"Cannot write orders store: {exc}") from exc
