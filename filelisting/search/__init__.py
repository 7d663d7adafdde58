"""Search helpers that annotate listing trees with match flags."""

from __future__ import annotations

from .matching import mark_search_results, name_matches

__all__ = ["mark_search_results", "name_matches"]
