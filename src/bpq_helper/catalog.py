"""Loading and integrity checks for the riddle corpus and region catalog."""

from __future__ import annotations

import json
import logging
import math
from collections import Counter
from pathlib import Path
from typing import Any

from .models import RegionRecord, RiddleRecord, ShelfCatalog

BUNDLED_DATA = Path(__file__).parent / "data" / "butler_pq.json"

_logger = logging.getLogger("bpq_helper.catalog")


class CatalogError(ValueError):
    """Raised when the static shelf data cannot be loaded or is inconsistent."""


def _text(item: dict[str, Any], key: str) -> str:
    value = item[key]
    if not isinstance(value, str):
        raise CatalogError(f"Shelf data has a malformed entry: {key!r} must be a string, got {value!r}")
    return value


def _number(item: dict[str, Any], key: str) -> float:
    value = item[key]
    # bool is an int subclass; true/false are not coordinates
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise CatalogError(f"Shelf data has a malformed entry: {key!r} must be a number, got {value!r}")
    return float(value)


def parse_catalog(payload: dict[str, Any]) -> ShelfCatalog:
    try:
        regions = tuple(
            RegionRecord(
                id=_text(item, "id"),
                label=_text(item, "label"),
                x=_number(item, "x"),
                y=_number(item, "y"),
                width=_number(item, "width"),
                height=_number(item, "height"),
            )
            for item in payload["regions"]
        )
        riddles = tuple(
            RiddleRecord(region_id=_text(item, "region_id"), text=_text(item, "text")) for item in payload["riddles"]
        )
    except CatalogError:
        raise
    except KeyError as exc:
        raise CatalogError(f"Shelf data is missing required key {exc}") from exc
    except (TypeError, ValueError) as exc:
        raise CatalogError(f"Shelf data has a malformed entry: {exc}") from exc

    return ShelfCatalog(riddles=riddles, regions=regions)


def load_catalog(path: str | Path | None = None, *, logger: logging.Logger | None = None) -> ShelfCatalog:
    """Read shelf data from ``path``, or the bundled Butler PQ data when no path is given."""
    log = logger or _logger
    target = Path(path).expanduser() if path else BUNDLED_DATA
    if not target.exists():
        raise CatalogError(f"Shelf data file not found: {target}")

    try:
        payload = json.loads(target.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Shelf data file is not valid JSON: {target} ({exc})") from exc
    except UnicodeDecodeError as exc:
        raise CatalogError(f"Shelf data file is not UTF-8 text: {target} ({exc})") from exc
    except OSError as exc:
        raise CatalogError(f"Cannot read shelf data file: {target} ({exc})") from exc
    if not isinstance(payload, dict):
        raise CatalogError(f"Shelf data file must hold a JSON object: {target}")

    catalog = parse_catalog(payload)
    log.info(
        "catalog_loaded",
        extra={"path": str(target), "regions": len(catalog.regions), "riddles": len(catalog.riddles)},
    )
    return catalog


def validate_catalog(catalog: ShelfCatalog) -> list[str]:
    """Return every integrity problem found; an empty list means the data is usable."""
    problems: list[str] = []

    counts = Counter(region.id for region in catalog.regions)
    for region_id, count in sorted(counts.items()):
        if count > 1:
            problems.append(f"Region id {region_id!r} is defined {count} times")

    for region in catalog.regions:
        if not region.label.strip():
            problems.append(f"Region {region.id!r} has an empty label")
        if not all(math.isfinite(value) for value in (region.x, region.y, region.width, region.height)):
            problems.append(f"Region {region.id!r} has a non-finite coordinate")
            continue
        if min(region.x, region.y, region.width, region.height) < 0:
            problems.append(f"Region {region.id!r} has a negative coordinate")
        if region.x + region.width > 100 or region.y + region.height > 100:
            problems.append(f"Region {region.id!r} extends beyond the map")

    for index, riddle in enumerate(catalog.riddles):
        if riddle.region_id not in counts:
            problems.append(f"Riddle #{index + 1} references unknown region {riddle.region_id!r}")

    return problems


def ensure_valid(catalog: ShelfCatalog, *, logger: logging.Logger | None = None) -> ShelfCatalog:
    problems = validate_catalog(catalog)
    if problems:
        (logger or _logger).warning("catalog_invalid", extra={"problems": problems})
        raise CatalogError("Invalid shelf data:\n" + "\n".join(f"- {problem}" for problem in problems))
    return catalog
