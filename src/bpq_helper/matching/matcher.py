"""Partial-prefix matching of query fragments against the riddle corpus."""

from __future__ import annotations

from typing import Iterable, Sequence

from bpq_helper.matching.normalizer import tokenize
from bpq_helper.models import MatchStatus, RiddleRecord


def _riddle_matches(query_tokens: list[str], text_tokens: list[str]) -> bool:
    # every query token must start at least one word of the riddle, in any order
    return all(any(word.startswith(token) for word in text_tokens) for token in query_tokens)


def find_matches(query: str, corpus: Iterable[RiddleRecord]) -> frozenset[str]:
    """Return the ids of every region whose riddle contains all query tokens as word prefixes.

    A blank query matches nothing rather than everything.
    """
    query_tokens = tokenize(query)
    if not query_tokens:
        return frozenset()

    return frozenset(
        riddle.region_id for riddle in corpus if _riddle_matches(query_tokens, tokenize(riddle.text))
    )


def match_fields(queries: Sequence[str], corpus: Sequence[RiddleRecord]) -> list[frozenset[str]]:
    """Match each query field independently, preserving field order."""
    return [find_matches(query, corpus) for query in queries]


def match_status(query: str, matches: frozenset[str]) -> MatchStatus:
    if not tokenize(query):
        return MatchStatus.EMPTY
    if not matches:
        return MatchStatus.NONE
    if len(matches) == 1:
        return MatchStatus.UNIQUE
    return MatchStatus.AMBIGUOUS
