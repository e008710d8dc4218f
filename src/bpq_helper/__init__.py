"""Riddle-to-shelf matching helper for the Butler PQ bookshelf stage."""

__version__ = "0.1.0"
