"""Column sort state machine and folders-first file comparator."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from functools import cmp_to_key

from .natural import natural_compare
from .types import (
    FOLDER_TYPE,
    INITIAL_SORT_STATE,
    SORT_ASCENDING,
    SORT_DESCENDING,
    SORT_FIELDS,
    SORT_ORIGINAL,
    FileNode,
    IndexedEntry,
    SortState,
)

logger = logging.getLogger(__name__)

FileComparator = Callable[[IndexedEntry, IndexedEntry], int]

# Header clicks alternate between ascending and descending once started.
_NEXT_SORT_STATE = {
    SORT_ORIGINAL: SORT_ASCENDING,
    SORT_ASCENDING: SORT_DESCENDING,
    SORT_DESCENDING: SORT_ASCENDING,
}


def next_sort_state(current: SortState, field: str) -> SortState:
    """Return the state reached by clicking the ``field`` column header."""
    if field not in SORT_FIELDS:
        raise ValueError(f"unknown sort field: {field!r}")
    state = current.state if current.field == field else SORT_ORIGINAL
    new_state = _NEXT_SORT_STATE[state]
    return SortState(state=new_state, reverse=new_state == SORT_DESCENDING, field=field)


def folders_first(type1: str, type2: str) -> int:
    """Order folder-typed entries before every other type."""
    if type1 == type2:
        return 0
    if type1 == FOLDER_TYPE:
        return -1
    if type2 == FOLDER_TYPE:
        return 1
    return 0


def _value_rank(value: object) -> int:
    """Group order for values that cannot be compared directly: numbers, other, ``None``."""
    if value is None:
        return 2
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return 0
    return 1


def compare_values(first: object, second: object) -> int:
    """Relational three-way comparison.

    Values of incomparable types are ordered by group, so missing (``None``)
    values sort after every present value.
    """
    try:
        if first < second:
            return -1
        if first > second:
            return 1
        return 0
    except TypeError:
        rank1 = _value_rank(first)
        rank2 = _value_rank(second)
        return (rank1 > rank2) - (rank1 < rank2)


def compare_field(first: FileNode, second: FileNode, field: str) -> int:
    if field == "name":
        return natural_compare(first.name, second.name)
    return compare_values(getattr(first, field), getattr(second, field))


def make_file_comparator(state: SortState) -> FileComparator:
    """Build a comparator bound to a snapshot of ``state``.

    Folder partitioning ignores ``reverse``; the field comparison honors it;
    remaining ties fall back to the original index so equal rows never swap.
    """
    field = state.field
    reverse = state.reverse

    def compare_files(first: IndexedEntry, second: IndexedEntry) -> int:
        comp = folders_first(first.value.type, second.value.type)
        if comp != 0:
            return comp
        comp = compare_field(first.value, second.value, field)
        if comp != 0:
            return -comp if reverse else comp
        if first.index == second.index:
            return 0
        return -1 if first.index < second.index else 1

    return compare_files


def index_entries(files: Sequence[FileNode]) -> list[IndexedEntry]:
    return [IndexedEntry(value=node, index=idx) for idx, node in enumerate(files)]


def sort_listing(files: Sequence[FileNode], state: SortState) -> list[FileNode]:
    """Return ``files`` in display order for ``state``.

    The original (unsorted) state keeps the incoming order.
    """
    if state.state == SORT_ORIGINAL:
        return list(files)
    comparator = make_file_comparator(state)
    entries = sorted(index_entries(files), key=cmp_to_key(comparator))
    return [entry.value for entry in entries]


class SortController:
    """Tracks the sort column/direction clicked in the files header."""

    def __init__(self, state: SortState = INITIAL_SORT_STATE) -> None:
        self._state = state

    @property
    def state(self) -> SortState:
        return self._state

    def reset(self) -> None:
        """Return to the original order, used on init and folder navigation."""
        self._state = INITIAL_SORT_STATE

    def sort_files(self, field: str) -> SortState:
        """Advance the tri-state cycle for a click on ``field``."""
        self._state = next_sort_state(self._state, field)
        logger.debug(
            "sort by %s state=%d reverse=%s",
            self._state.field,
            self._state.state,
            self._state.reverse,
        )
        return self._state

    def comparator(self) -> FileComparator:
        return make_file_comparator(self._state)

    def compare_files(self, first: IndexedEntry, second: IndexedEntry) -> int:
        return make_file_comparator(self._state)(first, second)

    def sort(self, files: Sequence[FileNode]) -> list[FileNode]:
        return sort_listing(files, self._state)
