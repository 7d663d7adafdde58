"""Default search-match annotation for listing trees."""

from __future__ import annotations

from collections.abc import Sequence

from ..listing_model.flatten import iter_tree_preorder
from ..listing_model.types import FileNode


def name_matches(name: str, query: str) -> bool:
    """Case-insensitive substring match of ``query`` inside ``name``."""
    if not query:
        return False
    return query.casefold() in name.casefold()


def mark_search_results(nodes: Sequence[FileNode] | None, query: str) -> int:
    """Set ``in_result`` on every node of the tree and return the match count.

    An empty ``query`` clears all flags.
    """
    matched = 0
    for node in iter_tree_preorder(nodes):
        node.in_result = name_matches(node.name, query)
        if node.in_result:
            matched += 1
    return matched
