"""Files pane of the open/save dialog: selection, rename, and row order."""

from __future__ import annotations

from .controller import FilesController, RenameService, rename_target_path

__all__ = ["FilesController", "RenameService", "rename_target_path"]
