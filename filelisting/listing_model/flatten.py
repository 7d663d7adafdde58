"""Browse/search projections of a file tree into visible rows."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from .types import FileListing, FileNode


def iter_tree_preorder(nodes: Sequence[FileNode] | None) -> Iterator[FileNode]:
    """Yield nodes depth-first, each parent before its children in order."""
    if not nodes:
        return
    stack: list[FileNode] = list(reversed(nodes))
    while stack:
        node = stack.pop()
        yield node
        children = node.children
        if children:
            stack.extend(reversed(children))


def get_files(nodes: Sequence[FileNode] | None, search_active: bool) -> FileListing:
    """Project ``nodes`` into visible rows.

    Browse mode returns the top-level listing untouched. Search mode flattens
    the whole tree so ancestors of matching nodes stay visible, counting only
    nodes flagged ``in_result``.
    """
    if not search_active:
        visible = nodes if nodes is not None else []
        return FileListing(
            visible=visible,
            match_count=len(visible),
            has_results=len(visible) > 0,
        )

    visible = []
    match_count = 0
    for node in iter_tree_preorder(nodes):
        visible.append(node)
        if node.in_result:
            match_count += 1
    return FileListing(visible=visible, match_count=match_count, has_results=match_count > 0)
