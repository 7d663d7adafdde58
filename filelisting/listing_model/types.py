"""Listing datatypes shared by the ordering and flattening modules."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Literal, Union

FOLDER_TYPE = "folder"
# Type label the listing service reports for folders in rename requests.
FOLDER_DISPLAY_TYPE = "File folder"

SortField = Literal["name", "type", "date"]
SORT_FIELDS: tuple[str, ...] = ("name", "type", "date")

SORT_ORIGINAL = 0
SORT_ASCENDING = 1
SORT_DESCENDING = 2

Timestamp = Union[int, float, str, None]


@dataclass(frozen=True)
class ObjectId:
    """Repository identifier of one listed file or folder."""

    id: str


@dataclass(eq=False)
class FileNode:
    """One file or folder row from the listing/search service.

    Nodes are mutable: the search annotator flips ``in_result`` and rename
    updates ``name``/``object_id`` in place. Equality is identity so a node
    can be located in a flattened listing even when names repeat.
    """

    name: str
    type: str = ""
    date: Timestamp = None
    parent_path: str = ""
    path: str = ""
    object_id: ObjectId = field(default_factory=lambda: ObjectId(""))
    children: list["FileNode"] = field(default_factory=list)
    in_result: bool = False
    is_editing: bool = False

    def __post_init__(self) -> None:
        if self.children is None:
            self.children = []

    @property
    def is_folder(self) -> bool:
        return self.type in (FOLDER_TYPE, FOLDER_DISPLAY_TYPE)


@dataclass(frozen=True)
class IndexedEntry:
    """A node paired with its position in the pre-sort sequence."""

    value: FileNode
    index: int


@dataclass(frozen=True)
class SortState:
    """Column sort state: ``state`` 0 original, 1 ascending, 2 descending."""

    state: int = SORT_ORIGINAL
    reverse: bool = False
    field: str = "name"


INITIAL_SORT_STATE = SortState()


@dataclass(frozen=True)
class FileListing:
    """Visible rows plus match counters produced by ``get_files``."""

    visible: Sequence[FileNode]
    match_count: int
    has_results: bool


__all__ = [
    "FOLDER_TYPE",
    "FOLDER_DISPLAY_TYPE",
    "SortField",
    "SORT_FIELDS",
    "SORT_ORIGINAL",
    "SORT_ASCENDING",
    "SORT_DESCENDING",
    "Timestamp",
    "ObjectId",
    "FileNode",
    "IndexedEntry",
    "SortState",
    "INITIAL_SORT_STATE",
    "FileListing",
]
