"""JSON payload codec for listing/search service node trees."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path

from .types import FileNode, ObjectId


class ListingPayloadError(ValueError):
    """Raised when a listing payload does not describe a node tree."""


def object_id_from_payload(raw: object) -> ObjectId:
    """Accept ``{"id": ...}`` mappings or bare identifier strings."""
    if isinstance(raw, ObjectId):
        return raw
    if isinstance(raw, Mapping):
        raw = raw.get("id", "")
    if raw is None:
        return ObjectId("")
    if not isinstance(raw, (str, int)):
        raise ListingPayloadError(f"invalid objectId: {raw!r}")
    return ObjectId(str(raw))


def node_from_payload(raw: object) -> FileNode:
    """Build a ``FileNode`` (recursively) from one service JSON object."""
    if not isinstance(raw, Mapping):
        raise ListingPayloadError(f"listing node must be an object, got {type(raw).__name__}")
    name = raw.get("name")
    if not isinstance(name, str):
        raise ListingPayloadError(f"listing node is missing a name: {raw!r}")

    children_raw = raw.get("children")
    if children_raw is None:
        children: list[FileNode] = []
    else:
        children = nodes_from_payload(children_raw)

    parent_path = raw.get("parentPath", raw.get("parent", ""))
    return FileNode(
        name=name,
        type=str(raw.get("type") or ""),
        date=raw.get("date"),
        parent_path=str(parent_path or ""),
        path=str(raw.get("path") or ""),
        object_id=object_id_from_payload(raw.get("objectId")),
        children=children,
        in_result=bool(raw.get("inResult", False)),
        is_editing=bool(raw.get("isEditing", False)),
    )


def nodes_from_payload(raw: object) -> list[FileNode]:
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
        raise ListingPayloadError(f"listing children must be a list, got {type(raw).__name__}")
    return [node_from_payload(item) for item in raw]


def node_to_payload(node: FileNode) -> dict[str, object]:
    """Serialize ``node`` back to the service's camelCase shape."""
    return {
        "name": node.name,
        "type": node.type,
        "date": node.date,
        "parentPath": node.parent_path,
        "path": node.path,
        "objectId": {"id": node.object_id.id},
        "children": [node_to_payload(child) for child in node.children],
        "inResult": node.in_result,
        "isEditing": node.is_editing,
    }


def listing_from_document(data: object) -> list[FileNode]:
    """Accept a bare node list or a folder object carrying ``children``/``files``."""
    if isinstance(data, Mapping):
        for key in ("children", "files"):
            if key in data:
                return nodes_from_payload(data[key] or [])
        raise ListingPayloadError("listing object has no 'children' or 'files' list")
    return nodes_from_payload(data)


def load_listing(path: Path) -> list[FileNode]:
    """Read a JSON listing document from ``path``.

    ``OSError`` propagates; undecodable JSON raises ``ListingPayloadError``.
    """
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ListingPayloadError(f"{path}: invalid JSON ({exc})") from exc
    return listing_from_document(data)
