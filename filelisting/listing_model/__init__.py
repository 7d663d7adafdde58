"""Listing model: node types, ordering, flattening, and row formatting.

Defines ``FileNode`` plus the folders-first natural comparator, the
tri-state column sort cycle, and browse/search projections of a node tree.
"""

from __future__ import annotations

from .flatten import get_files, iter_tree_preorder
from .natural import locale_compare, natural_compare
from .payload import (
    ListingPayloadError,
    listing_from_document,
    load_listing,
    node_from_payload,
    node_to_payload,
    nodes_from_payload,
)
from .rendering import format_listing_footer, format_listing_row, format_timestamp
from .sorting import (
    SortController,
    folders_first,
    make_file_comparator,
    next_sort_state,
    sort_listing,
)
from .types import (
    FOLDER_DISPLAY_TYPE,
    FOLDER_TYPE,
    INITIAL_SORT_STATE,
    SORT_ASCENDING,
    SORT_DESCENDING,
    SORT_FIELDS,
    SORT_ORIGINAL,
    FileListing,
    FileNode,
    IndexedEntry,
    ObjectId,
    SortState,
)

__all__ = [
    "FileNode",
    "ObjectId",
    "IndexedEntry",
    "SortState",
    "FileListing",
    "FOLDER_TYPE",
    "FOLDER_DISPLAY_TYPE",
    "INITIAL_SORT_STATE",
    "SORT_FIELDS",
    "SORT_ORIGINAL",
    "SORT_ASCENDING",
    "SORT_DESCENDING",
    "natural_compare",
    "locale_compare",
    "SortController",
    "folders_first",
    "make_file_comparator",
    "next_sort_state",
    "sort_listing",
    "get_files",
    "iter_tree_preorder",
    "ListingPayloadError",
    "node_from_payload",
    "nodes_from_payload",
    "node_to_payload",
    "listing_from_document",
    "load_listing",
    "format_listing_row",
    "format_listing_footer",
    "format_timestamp",
]
