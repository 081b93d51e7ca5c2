"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  The order store's schema
is initialized here, once per process, not on every request.
"""

from __future__ import annotations

from functools import lru_cache

from pizzeria.infrastructure.config import get_settings
from pizzeria.infrastructure.http.router import Router
from pizzeria.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)


@lru_cache()
def order_repository() -> JsonOrderRepository:
    repo = JsonOrderRepository(get_settings().orders_path)
    repo.ensure_schema()
    return repo


def router() -> Router:
    return Router(order_repo=order_repository())
