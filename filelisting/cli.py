"""Command-line front door for filelisting.

Loads a JSON listing, applies an optional search term and header clicks,
then prints the rows in the order the files pane would display them.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .files_pane import FilesController
from .listing_model import (
    SORT_FIELDS,
    FileNode,
    ListingPayloadError,
    format_listing_footer,
    format_listing_row,
    listing_from_document,
    load_listing,
)
from .logging_setup import get_logger
from .runtime import config
from .search import mark_search_results


def _read_listing(source: str) -> list[FileNode]:
    """Load a listing from a file path or ``-`` for stdin."""
    if source == "-":
        try:
            data = json.load(sys.stdin)
        except json.JSONDecodeError as exc:
            raise ListingPayloadError(f"<stdin>: invalid JSON ({exc})") from exc
        return listing_from_document(data)
    return load_listing(Path(source))


def render_listing(
    nodes: list[FileNode],
    search: str = "",
    sort_clicks: list[str] | None = None,
    date_format: str | None = None,
    no_color: bool = False,
    no_results_message: str | None = None,
) -> str:
    """Render the visible rows plus footer for ``nodes``."""
    controller = FilesController()
    controller.set_search(search)
    if search:
        mark_search_results(nodes, search)
    for field in sort_clicks or []:
        controller.sort_files(field)

    listing = controller.get_files(nodes)
    rows = controller.sorter.sort(listing.visible)
    active_date_format = date_format or config.load_date_format()
    out = [
        format_listing_row(row, search_query=search, date_format=active_date_format, no_color=no_color)
        for row in rows
    ]
    out.append(
        format_listing_footer(
            listing,
            controller.search_active,
            no_results_message or config.load_no_results_message(),
        )
    )
    return "\n".join(out) + "\n"


def main() -> None:
    """Parse CLI arguments and print the ordered listing."""
    parser = argparse.ArgumentParser(
        description="Print a file-dialog listing in folders-first natural order."
    )
    parser.add_argument(
        "listing",
        nargs="?",
        default="-",
        help="JSON listing file (list of nodes or a folder object). Defaults to stdin.",
    )
    parser.add_argument("--search", default="", help="Flatten the tree and mark names containing TERM.")
    parser.add_argument(
        "--sort",
        action="append",
        choices=SORT_FIELDS,
        default=[],
        help="Click a column header; repeat to toggle direction.",
    )
    parser.add_argument("--date-format", default=None, help="strftime pattern for the date column.")
    parser.add_argument("--locale", default=None, help="Collation locale for name ordering.")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Persist --date-format and --locale as defaults.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable match highlighting.")
    parser.add_argument("--verbose", action="store_true", help="Log debug details to stderr.")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write log records to this file.")
    args = parser.parse_args()

    get_logger(verbose=args.verbose, logfile=args.log_file)

    if args.save_defaults:
        if args.date_format:
            config.save_date_format(args.date_format)
        if args.locale:
            config.save_collation_locale(args.locale)

    # None selects the environment locale.
    locale_name = args.locale or config.load_collation_locale()
    if not config.apply_collation_locale(locale_name) and locale_name is not None:
        raise SystemExit(f"Unsupported locale: {locale_name}")

    try:
        nodes = _read_listing(args.listing)
    except FileNotFoundError:
        raise SystemExit(f"Path not found: {args.listing}")
    except (OSError, ListingPayloadError) as exc:
        raise SystemExit(str(exc))

    no_color = args.no_color or not sys.stdout.isatty()
    sys.stdout.write(
        render_listing(
            nodes,
            search=args.search,
            sort_clicks=args.sort,
            date_format=args.date_format,
            no_color=no_color,
        )
    )


if __name__ == "__main__":
    main()
