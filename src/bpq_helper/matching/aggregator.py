"""Per-region aggregation of field match sets into highlight orders."""

from __future__ import annotations

from typing import Iterable, Sequence

FIELD_COUNT = 4


def aggregate(
    match_results: Sequence[frozenset[str] | set[str]],
    region_ids: Iterable[str] | None = None,
) -> dict[str, list[int]]:
    """Map each claimed region to the ascending 1-based indices of the fields that match it.

    When ``region_ids`` is given, only those regions are reported and the mapping follows
    their order; otherwise every region appearing in any result is reported in sorted order.
    Regions claimed by no field are omitted.
    """
    if region_ids is None:
        candidates: Iterable[str] = sorted(set().union(*match_results))
    else:
        candidates = region_ids

    assignment: dict[str, list[int]] = {}
    for region_id in candidates:
        orders = [index for index, matches in enumerate(match_results, start=1) if region_id in matches]
        if orders:
            assignment[region_id] = orders
    return assignment


def primary_order(orders: Sequence[int]) -> int | None:
    """Lowest claiming field index; decides the highlight colour when several fields agree."""
    return min(orders) if orders else None
