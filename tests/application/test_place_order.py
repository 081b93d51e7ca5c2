"""Integration tests for the PlaceOrder and ShowOrder use cases.

Uses in-memory fake repositories — no file I/O.
"""

from decimal import Decimal

import pytest

from pizzeria.application.place_order import PlaceOrderHandler
from pizzeria.application.show_order import ShowOrderHandler
from pizzeria.domain.exceptions import (
    InvalidPizzaError,
    PaymentErrorKind,
    PaymentValidationError,
    PersistenceError,
)
from tests.fakes import (
    FakeOrderRepository,
    UnavailableOrderRepository,
    VALID_TOKEN,
    order_body,
)


def _setup() -> tuple[PlaceOrderHandler, FakeOrderRepository]:
    order_repo = FakeOrderRepository()
    return PlaceOrderHandler(order_repo), order_repo


class TestPlaceOrderHappyPath:

    def test_order_is_confirmed(self):
        handler, _ = _setup()
        dto = handler.handle(order_body())
        assert dto.status == "confirmed"

    def test_paid_amount_matches_payment(self):
        handler, _ = _setup()
        dto = handler.handle(order_body(payment={
            "token": VALID_TOKEN, "amount": 21.37, "currency": "USD",
        }))
        assert dto.paid_amount == Decimal("21.37")
        assert dto.to_dict()["paidAmount"] == 21.37

    def test_items_echo_submitted_body(self):
        handler, _ = _setup()
        body = order_body()
        dto = handler.handle(body)
        assert dto.items == body

    def test_persists_order(self):
        handler, order_repo = _setup()
        dto = handler.handle(order_body())
        saved = order_repo.get(dto.order_id)
        assert saved is not None
        assert saved.paid_amount == Decimal("16.28")

    def test_ids_unique_for_identical_input(self):
        handler, order_repo = _setup()
        ids = {handler.handle(order_body()).order_id for _ in range(5)}
        assert len(ids) == 5
        assert len(order_repo) == 5

    def test_uses_id_factory(self):
        order_repo = FakeOrderRepository()
        handler = PlaceOrderHandler(order_repo, id_factory=lambda: "fixed-id")
        assert handler.handle(order_body()).order_id == "fixed-id"

    def test_to_dict_shape(self):
        handler, _ = _setup()
        data = handler.handle(order_body()).to_dict()
        assert set(data) == {"orderId", "status", "paidAmount", "items"}


class TestPlaceOrderValidation:

    def _never_called(self):
        raise AssertionError("id generated for an invalid order")

    def test_invalid_pizza_rejected_before_id_generation(self):
        order_repo = FakeOrderRepository()
        handler = PlaceOrderHandler(order_repo, id_factory=self._never_called)
        with pytest.raises(InvalidPizzaError):
            handler.handle({"size": "medium", "payment": {}})
        assert len(order_repo) == 0

    def test_pizza_checked_before_payment(self):
        handler, _ = _setup()
        with pytest.raises(InvalidPizzaError):
            handler.handle({"payment": {}})

    def test_missing_payment_block(self):
        handler, order_repo = _setup()
        body = order_body()
        del body["payment"]
        with pytest.raises(PaymentValidationError) as exc_info:
            handler.handle(body)
        assert exc_info.value.kind == PaymentErrorKind.MISSING_FIELDS
        assert len(order_repo) == 0

    def test_top_level_fields_do_not_count_as_payment(self):
        handler, _ = _setup()
        body = order_body(payment={}, token=VALID_TOKEN, amount=10, currency="USD")
        with pytest.raises(PaymentValidationError) as exc_info:
            handler.handle(body)
        assert exc_info.value.kind == PaymentErrorKind.MISSING_FIELDS

    def test_bad_token_not_persisted(self):
        order_repo = FakeOrderRepository()
        handler = PlaceOrderHandler(order_repo, id_factory=self._never_called)
        with pytest.raises(PaymentValidationError, match="Invalid payment token"):
            handler.handle(order_body(payment={
                "token": "tok", "amount": 10, "currency": "USD",
            }))
        assert len(order_repo) == 0


class TestPlaceOrderPersistenceFailure:

    def test_store_failure_propagates(self):
        handler = PlaceOrderHandler(UnavailableOrderRepository())
        with pytest.raises(PersistenceError):
            handler.handle(order_body())


class TestShowOrder:

    def test_returns_stored_order(self):
        place, order_repo = _setup()
        placed = place.handle(order_body())
        shown = ShowOrderHandler(order_repo).handle(placed.order_id)
        assert shown == placed

    def test_unknown_id_returns_none(self):
        assert ShowOrderHandler(FakeOrderRepository()).handle("nope") is None

    def test_store_failure_propagates(self):
        with pytest.raises(PersistenceError):
            ShowOrderHandler(UnavailableOrderRepository()).handle("abc")
