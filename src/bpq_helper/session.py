"""Caller-side state: the four raw query strings."""

from __future__ import annotations

import logging

from bpq_helper.matching import FIELD_COUNT
from bpq_helper.models import ShelfCatalog
from bpq_helper.presentation import HelperView, build_view


class QuerySession:
    """Holds the text of each riddle field; every view is recomputed from scratch."""

    def __init__(self, catalog: ShelfCatalog, *, logger: logging.Logger | None = None) -> None:
        self._catalog = catalog
        self._logger = logger or logging.getLogger("bpq_helper.session")
        self._queries = [""] * FIELD_COUNT

    @property
    def catalog(self) -> ShelfCatalog:
        return self._catalog

    @property
    def queries(self) -> tuple[str, ...]:
        return tuple(self._queries)

    def set_field(self, order: int, text: str) -> None:
        if not 1 <= order <= FIELD_COUNT:
            raise ValueError(f"Field order must be between 1 and {FIELD_COUNT}, got {order}")
        self._queries[order - 1] = text
        self._logger.debug("field_updated", extra={"order": order, "query": text})

    def reset(self) -> None:
        self._queries = [""] * FIELD_COUNT
        self._logger.debug("fields_reset")

    def view(self) -> HelperView:
        return build_view(self._queries, self._catalog)
