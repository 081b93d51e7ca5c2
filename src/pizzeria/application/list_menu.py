"""Application service: List Menu use case (query)."""

from __future__ import annotations

from pizzeria.domain.model.catalog import MENU, Catalog


class ListMenuHandler:

    def __init__(self, catalog: Catalog = MENU) -> None:
        self._catalog = catalog

    def handle(self) -> dict:
        return self._catalog.to_dict()
