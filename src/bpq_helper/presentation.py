"""View model consumed by renderers: per-field feedback, previews and shelf highlights.

Nothing here draws. A renderer (the Rich CLI, or any UI) reads a ``HelperView`` and
decides how to paint it. Colour is picked from a shelf's primary order only, while
every claiming order stays available for badges.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .config import settings
from .matching import aggregate, match_fields, match_status, primary_order
from .models import MatchStatus, RegionRecord, ShelfCatalog

ORDER_COLORS: dict[int, tuple[int, int, int]] = {
    1: (250, 204, 21),
    2: (74, 222, 128),
    3: (96, 165, 250),
    4: (244, 114, 182),
}


def order_color(order: int | None) -> str | None:
    """Hex colour for a field order, or ``None`` for an inactive shelf."""
    rgb = ORDER_COLORS.get(order) if order is not None else None
    if rgb is None:
        return None
    return "#{:02x}{:02x}{:02x}".format(*rgb)


@dataclass(slots=True)
class FieldReport:
    order: int
    query: str
    matches: frozenset[str]
    status: MatchStatus
    feedback: str
    preview: RegionRecord | None
    preview_status: str


@dataclass(slots=True)
class ShelfHighlight:
    region: RegionRecord
    orders: list[int] = field(default_factory=list)
    primary_order: int | None = None

    @property
    def active(self) -> bool:
        return bool(self.orders)

    @property
    def color(self) -> str | None:
        return order_color(self.primary_order)


@dataclass(slots=True)
class HelperView:
    fields: list[FieldReport]
    shelves: list[ShelfHighlight]

    def active_shelves(self) -> list[ShelfHighlight]:
        return [shelf for shelf in self.shelves if shelf.active]


def field_feedback(query: str, matches: frozenset[str]) -> str:
    # an untouched field shows nothing; whitespace counts as typed
    if not query:
        return ""
    if len(matches) > 1:
        return f"{len(matches)} matches found"
    if len(matches) == 1:
        return "Unique match found ✅"
    return "No matches yet"


def preview_shelf(matches: frozenset[str], catalog: ShelfCatalog) -> RegionRecord | None:
    """First matching region in catalog order."""
    for region in catalog.regions:
        if region.id in matches:
            return region
    return None


def preview_status(query: str, matches: frozenset[str], shelf: RegionRecord | None) -> str:
    if not query.strip():
        return "No input yet."
    label = shelf.label if shelf else ""
    if not matches:
        return "No shelves match this text."
    if len(matches) == 1:
        return f"Unique shelf: {label}"
    return f"{len(matches)} possible shelves. Showing one example: {label}"


def preview_viewbox(
    region: RegionRecord,
    map_width: int | None = None,
    map_height: int | None = None,
) -> tuple[float, float, float, float]:
    """Pixel rectangle (x, y, width, height) of a region on the full-size map.

    The map size defaults to the configured ``map_width`` and ``map_height``.
    """
    map_width = settings.map_width if map_width is None else map_width
    map_height = settings.map_height if map_height is None else map_height
    return (
        region.x / 100 * map_width,
        region.y / 100 * map_height,
        region.width / 100 * map_width,
        region.height / 100 * map_height,
    )


def build_view(queries: Sequence[str], catalog: ShelfCatalog) -> HelperView:
    """Recompute everything a renderer needs from the raw query strings."""
    results = match_fields(queries, catalog.riddles)

    fields: list[FieldReport] = []
    for order, (query, matches) in enumerate(zip(queries, results), start=1):
        shelf = preview_shelf(matches, catalog)
        fields.append(
            FieldReport(
                order=order,
                query=query,
                matches=matches,
                status=match_status(query, matches),
                feedback=field_feedback(query, matches),
                preview=shelf,
                preview_status=preview_status(query, matches, shelf),
            )
        )

    assignment = aggregate(results, catalog.region_ids())
    shelves = []
    for region in catalog.regions:
        orders = assignment.get(region.id, [])
        shelves.append(ShelfHighlight(region=region, orders=orders, primary_order=primary_order(orders)))

    return HelperView(fields=fields, shelves=shelves)
