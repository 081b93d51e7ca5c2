"""API Gateway Lambda proxy entry point.

Input:  https://docs.aws.amazon.com/apigateway/latest/developerguide/set-up-lambda-proxy-integrations.html#api-gateway-simple-proxy-for-lambda-input-format
Output: ``{"statusCode": int, "body": str}``

Like ``Router.dispatch()``, this never raises: an undecodable body or a
store that cannot be initialized still produces an envelope.
"""

from __future__ import annotations

import base64
import binascii
import logging
from functools import lru_cache

from pizzeria.domain.exceptions import MalformedBodyError
from pizzeria.infrastructure import bootstrap
from pizzeria.infrastructure.config import get_settings
from pizzeria.infrastructure.http.router import Router, error
from pizzeria.infrastructure.logging_config import setup_logging

log = logging.getLogger(__name__)


def lambda_handler(event: dict, context: object = None) -> dict:
    try:
        body = _event_body(event)
    except MalformedBodyError as exc:
        return error(400, "BAD_REQUEST", str(exc)).to_envelope()

    try:
        router = _router()
    except Exception:
        log.exception("ERROR_500_INTERNAL: Failed to initialize the order store.")
        return error(500, "INTERNAL", "Order store unavailable.").to_envelope()

    response = router.dispatch(
        event.get("httpMethod", ""), event.get("path", ""), body
    )
    return response.to_envelope()


def _event_body(event: dict) -> str | bytes | None:
    body = event.get("body")
    if body is None or not event.get("isBase64Encoded"):
        return body
    try:
        return base64.b64decode(body, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise MalformedBodyError("Malformed base64 body.") from exc


# One router per warm container; the store schema is ensured on first use.
# A failed initialization is not cached, so the next invocation retries.
@lru_cache()
def _router() -> Router:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    return bootstrap.router()
