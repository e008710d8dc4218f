"""Canonical text form shared by riddle text and user queries."""

from __future__ import annotations

import re

# Apostrophes and hyphens are dropped without a separator: "shan't" -> "shant".
_JOINERS = re.compile(r"['-]")
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def normalize(text: str) -> str:
    """Lowercase, fold punctuation runs to single spaces, and trim."""
    lowered = text.lower()
    joined = _JOINERS.sub("", lowered)
    return _NON_ALNUM.sub(" ", joined).strip()


def tokenize(text: str) -> list[str]:
    return normalize(text).split()
