"""Folders-first natural ordering and search flattening for file-dialog listings."""

from __future__ import annotations

from .files_pane import FilesController
from .listing_model import (
    FileListing,
    FileNode,
    IndexedEntry,
    ObjectId,
    SortController,
    SortState,
    get_files,
    natural_compare,
    sort_listing,
)

__all__ = [
    "FilesController",
    "FileListing",
    "FileNode",
    "IndexedEntry",
    "ObjectId",
    "SortController",
    "SortState",
    "get_files",
    "natural_compare",
    "sort_listing",
]
