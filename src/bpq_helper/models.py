from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class MatchStatus(str, Enum):
    """How many shelves a single query field currently resolves to."""

    EMPTY = "empty"
    NONE = "none"
    UNIQUE = "unique"
    AMBIGUOUS = "ambiguous"


@dataclass(frozen=True, slots=True)
class RiddleRecord:
    region_id: str
    text: str


@dataclass(frozen=True, slots=True)
class RegionRecord:
    """A labeled rectangle on the map, in percent of the image size."""

    id: str
    label: str
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class ShelfCatalog:
    """Riddle corpus plus region catalog, loaded once at startup."""

    riddles: tuple[RiddleRecord, ...]
    regions: tuple[RegionRecord, ...]

    def region(self, region_id: str) -> RegionRecord | None:
        for region in self.regions:
            if region.id == region_id:
                return region
        return None

    def region_ids(self) -> list[str]:
        return [region.id for region in self.regions]
