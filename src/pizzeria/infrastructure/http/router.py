"""HTTP routing — maps method + path onto the application handlers.

Every outcome, failures included, is turned into a ``Response`` here:
nothing raised by a handler escapes ``Router.dispatch()``.  Error bodies
have the shape ``{"message": "ERROR_<code>_<KIND>: <description>"}``.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from pizzeria.application.customize_pizza import CustomizePizzaHandler
from pizzeria.application.example_order import ExampleOrderHandler
from pizzeria.application.list_menu import ListMenuHandler
from pizzeria.application.place_order import PlaceOrderHandler
from pizzeria.application.show_order import ShowOrderHandler
from pizzeria.domain.exceptions import (
    MalformedBodyError,
    PersistenceError,
    ValidationError,
)
from pizzeria.domain.repository.order_repository import OrderRepository

log = logging.getLogger(__name__)

ORDER_PLACED = "Payment processed successfully and order placed."
ORDER_RETRIEVED = "Retrieved Order Details Successfully"

@dataclass(frozen=True)
class Response:
    status_code: int
    body: str

    def to_envelope(self) -> dict:
        return {"statusCode": self.status_code, "body": self.body}

def ok(payload: dict) -> Response:
    return Response(200, json.dumps(payload))

def error(status_code: int, kind: str, description: str | None = None) -> Response:
    message = f"ERROR_{status_code}_{kind}"
    if description:
        message = f"{message}: {description}"
    return Response(status_code, json.dumps({"message": message}))

def decode_body(body: str | bytes | None) -> Any:
    """Decode a JSON request body; an absent body decodes to ``{}``."""
    if body is None or body == "" or body == b"":
        return {}
    try:
        return json.loads(body)
    except (ValueError, RecursionError) as exc:
        raise MalformedBodyError("Malformed JSON body.") from exc

class Router:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._list_menu = ListMenuHandler()
        self._customize = CustomizePizzaHandler()
        self._place_order = PlaceOrderHandler(order_repo)
        self._show_order = ShowOrderHandler(order_repo)
        self._example_order = ExampleOrderHandler()

    def dispatch(self, method: str, path: str, body: str | bytes | None = None) -> Response:
        log.info("httpMethod: %s, path: %s", method, path)
        try:
            return self._route(method.upper(), path, body)
        except ValidationError as exc:
            log.info("Rejected %s %s: %s", method, path, exc)
            return error(400, "BAD_REQUEST", str(exc))
        except Exception:
            log.exception("Unhandled error for %s %s", method, path)
            return error(500, "INTERNAL", "Unexpected server error.")

    # --- Routes ---------------------------------------------------------------

    def _route(self, method: str, path: str, body: str | bytes | None) -> Response:
        if method == "GET" and path == "/menu":
            return ok({"menu": self._list_menu.handle()})

        if method == "POST" and path == "/customize":
            return ok(self._customize.handle(decode_body(body)).to_dict())

        if method == "POST" and path == "/order":
            return self._place(decode_body(body))

        if method == "GET" and path.startswith("/order/"):
            return self._show(path.split("/")[2])

        if method == "GET" and path == "/example_order":
            return ok(self._example_order.handle())

        return error(404, "NOT_FOUND")

    def _place(self, body: Any) -> Response:
        try:
            dto = self._place_order.handle(body)
        except PersistenceError:
            log.exception("ERROR_500_INTERNAL: Error saving order.")
            return error(500, "INTERNAL", "Failed to write order.")
        return ok({"order": dto.to_dict(), "message": ORDER_PLACED})

    def _show(self, order_id: str) -> Response:
        log.info("Retrieving order %s", order_id)
        try:
            dto = self._show_order.handle(order_id)
        except PersistenceError:
            log.exception("ERROR_500_INTERNAL: Error retrieving order %s.", order_id)
            return error(500, "INTERNAL", "Failed to read order.")

        payload: dict[str, Any] = {"message": ORDER_RETRIEVED}
        if dto is not None:
            payload["order"] = dto.to_dict()
        return ok(payload)
