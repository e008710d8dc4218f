"""Normalization, matching and aggregation core."""

from .aggregator import FIELD_COUNT, aggregate, primary_order
from .matcher import find_matches, match_fields, match_status
from .normalizer import normalize, tokenize

__all__ = [
    "FIELD_COUNT",
    "aggregate",
    "find_matches",
    "match_fields",
    "match_status",
    "normalize",
    "primary_order",
    "tokenize",
]
