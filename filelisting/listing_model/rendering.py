"""Text formatting for listing rows and result footers."""

from __future__ import annotations

from datetime import datetime

from .types import FileListing, FileNode, Timestamp

DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M"
NAME_COLUMN_WIDTH = 40
TYPE_COLUMN_WIDTH = 14
HIGHLIGHT_ON = "\033[7;1m"
HIGHLIGHT_OFF = "\033[27;22m"


def highlight_substring(text: str, query: str, no_color: bool = False) -> str:
    """Highlight first case-insensitive substring match in ``text``."""
    if not query or no_color:
        return text
    folded_text = text.casefold()
    folded_query = query.casefold()
    idx = folded_text.find(folded_query)
    if idx < 0:
        return text
    end = idx + len(query)
    return text[:idx] + HIGHLIGHT_ON + text[idx:end] + HIGHLIGHT_OFF + text[end:]


def format_timestamp(value: Timestamp, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """Format epoch-millisecond dates; strings pass through unchanged."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    try:
        return datetime.fromtimestamp(value / 1000).strftime(date_format)
    except (OverflowError, OSError, ValueError):
        return str(value)


def format_listing_row(
    node: FileNode,
    search_query: str = "",
    date_format: str = DEFAULT_DATE_FORMAT,
    no_color: bool = False,
    name_width: int = NAME_COLUMN_WIDTH,
) -> str:
    """Render one row as ``name  type  date`` columns."""
    name = node.name + ("/" if node.is_folder else "")
    # Pad before highlighting so escape codes do not count toward the width.
    padded = name.ljust(name_width)
    if node.in_result:
        padded = highlight_substring(padded, search_query, no_color=no_color)
    marker = "▸ " if node.is_folder else "  "
    return f"{marker}{padded}  {node.type:<{TYPE_COLUMN_WIDTH}}  {format_timestamp(node.date, date_format)}".rstrip()


def format_listing_footer(listing: FileListing, search_active: bool, no_results_message: str) -> str:
    if not listing.has_results:
        return no_results_message
    if search_active:
        noun = "result" if listing.match_count == 1 else "results"
        return f"{listing.match_count} {noun}"
    noun = "item" if listing.match_count == 1 else "items"
    return f"{listing.match_count} {noun}"
