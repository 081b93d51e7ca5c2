"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the HTTP router and the CLI can catch them uniformly and turn them into
user-facing messages.
"""

from __future__ import annotations

from enum import Enum


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A request failed structural or business validation."""


class InvalidPizzaError(ValidationError):
    """The pizza customization is malformed or incomplete."""


class MalformedBodyError(ValidationError):
    """The request body could not be decoded as JSON."""


class PaymentErrorKind(Enum):
    MISSING_FIELDS = "MISSING_FIELDS"
    INVALID_TOKEN = "INVALID_TOKEN"
    NON_POSITIVE_AMOUNT = "NON_POSITIVE_AMOUNT"


class PaymentValidationError(ValidationError):
    """Payment info failed one of the format checks."""

    def __init__(self, kind: PaymentErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind


class PersistenceError(DomainException):
    """The order store is unavailable or a read/write failed."""
