"""Payment info attached to an order.

Nothing is ever charged; the token and amount are only format-checked.
Checks run in a fixed order and stop at the first failure: fields, then
token, then amount.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from pizzeria.domain.exceptions import PaymentErrorKind, PaymentValidationError

# Tokens look like "pizza_payment_token_" + a 36-char UUID.
TOKEN_PREFIX_LENGTH = 20
TOKEN_SUFFIX_LENGTH = 36


@dataclass(frozen=True)
class PaymentInfo:
    token: str
    amount: Decimal
    currency: str


def validate_payment(raw: Any) -> PaymentInfo:
    """Validate the ``payment`` block of an order request."""
    if not isinstance(raw, dict) or not raw:
        raise _missing_fields()

    token = raw.get("token")
    currency = raw.get("currency")
    amount = _coerce_amount(raw.get("amount"))
    if not isinstance(token, str) or not token:
        raise _missing_fields()
    if not isinstance(currency, str) or not currency:
        raise _missing_fields()
    if amount is None:
        raise _missing_fields()

    if len(token[TOKEN_PREFIX_LENGTH:]) != TOKEN_SUFFIX_LENGTH:
        raise PaymentValidationError(
            PaymentErrorKind.INVALID_TOKEN, "Invalid payment token."
        )

    if amount <= Decimal("0"):
        raise PaymentValidationError(
            PaymentErrorKind.NON_POSITIVE_AMOUNT, "Invalid payment amount."
        )

    return PaymentInfo(token=token, amount=amount, currency=currency)


def _coerce_amount(value: Any) -> Decimal | None:
    # bool is an int subclass; true/false are not amounts
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return None
    amount = Decimal(str(value))
    if not amount.is_finite():
        return None
    return amount


def _missing_fields() -> PaymentValidationError:
    return PaymentValidationError(
        PaymentErrorKind.MISSING_FIELDS, "Invalid payment information."
    )
