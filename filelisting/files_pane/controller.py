"""Files-pane controller: selection, open, rename, and visible ordering."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from concurrent.futures import CancelledError, Future

from ..listing_model.flatten import get_files
from ..listing_model.payload import object_id_from_payload
from ..listing_model.sorting import SortController, sort_listing
from ..listing_model.types import FileListing, FileNode, SortState

logger = logging.getLogger(__name__)

RenameService = Callable[[str, str, str, str], "Future[Mapping[str, object]]"]
NodeCallback = Callable[[FileNode], None]
ErrorCallback = Callable[[BaseException], None]


def rename_target_path(node: FileNode) -> str:
    """Folders are renamed through their parent path, files through their own."""
    return node.parent_path if node.is_folder else node.path


class FilesController:
    """Owns per-folder listing state for the files pane of a file dialog.

    ``on_open``/``on_select``/``on_error`` replace the parent-component
    bindings; each is optional.
    """

    def __init__(
        self,
        rename_service: RenameService | None = None,
        *,
        on_open: NodeCallback | None = None,
        on_select: NodeCallback | None = None,
        on_error: ErrorCallback | None = None,
    ) -> None:
        self._rename_service = rename_service
        self._on_open = on_open
        self._on_select = on_select
        self._on_error = on_error
        self.sorter = SortController()
        self.folder: object | None = None
        self.search = ""
        self.selected_file: FileNode | None = None
        self.match_count = 0
        self.has_results = False

    @property
    def search_active(self) -> bool:
        return len(self.search) > 0

    @property
    def sort_state(self) -> SortState:
        return self.sorter.state

    def set_folder(self, folder: object | None) -> None:
        """Navigate to ``folder``: drop selection and restore original order."""
        self.folder = folder
        self.selected_file = None
        self.sorter.reset()

    def set_search(self, search: str | None) -> None:
        self.search = search or ""

    def select_file(self, node: FileNode) -> None:
        self.selected_file = node
        if self._on_select is not None:
            self._on_select(node)

    def commit_file(self, node: FileNode) -> None:
        """Open ``node`` unless its name is being edited."""
        if node.is_editing:
            return
        if self._on_open is not None:
            self._on_open(node)
        node.is_editing = False

    def sort_files(self, field: str) -> SortState:
        return self.sorter.sort_files(field)

    def get_files(self, nodes: Sequence[FileNode] | None) -> FileListing:
        """Project ``nodes`` for the current search term and record counters."""
        listing = get_files(nodes, self.search_active)
        self.match_count = listing.match_count
        self.has_results = listing.has_results
        return listing

    def visible_files(self, nodes: Sequence[FileNode] | None) -> list[FileNode]:
        listing = self.get_files(nodes)
        return sort_listing(listing.visible, self.sorter.state)

    def rename(self, node: FileNode, previous_name: str) -> Future:
        """Persist ``node.name`` through the rename service.

        On success ``node.object_id`` is replaced with the returned id. On
        failure the name reverts to ``previous_name`` and ``on_error`` fires.
        """
        if self._rename_service is None:
            raise RuntimeError("no rename service configured")
        future = self._rename_service(
            node.object_id.id,
            node.name,
            rename_target_path(node),
            node.type,
        )

        def finish(done: Future) -> None:
            exc: BaseException | None = CancelledError() if done.cancelled() else done.exception()
            if exc is None:
                try:
                    new_id = object_id_from_payload(done.result()["data"])
                    if not new_id.id:
                        raise ValueError("rename response has no id")
                    node.object_id = new_id
                except (KeyError, TypeError, ValueError) as parse_exc:
                    exc = parse_exc
                else:
                    logger.debug("renamed %s -> %r", node.object_id.id, node.name)
                    return
            logger.warning("rename of %r failed: %s", node.name, exc)
            node.name = previous_name
            if self._on_error is not None:
                self._on_error(exc)

        future.add_done_callback(finish)
        return future
