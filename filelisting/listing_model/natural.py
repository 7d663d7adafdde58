"""Natural (numeric-aware) string comparison for file names."""

from __future__ import annotations

import locale
import re
from collections.abc import Callable

# Optional leading whitespace and sign, digits with "," grouping and an
# optional fraction, or a bare ".digits" fraction.
NUMBER_RUN_RE = re.compile(r"\s*[-+]?(?:\d[\d,]*(?:\.\d+)?|\.\d+)")


def _sign(value: int | float) -> int:
    return (value > 0) - (value < 0)


def locale_compare(first: str, second: str) -> int:
    """Locale-aware three-way comparison using the active ``LC_COLLATE``."""
    return _sign(locale.strcoll(first, second))


def parse_number_run(run: str) -> int | float:
    """Convert a matched numeric run to its value, ignoring grouping commas.

    Runs without a fraction parse as ``int`` so long digit runs stay exact.
    """
    text = run.strip().replace(",", "")
    if "." in text:
        return float(text)
    try:
        return int(text)
    except ValueError:
        # Past the interpreter's int digit limit.
        return float(text)


def natural_compare(
    first: str,
    second: str,
    collate: Callable[[str, str], int] = locale_compare,
) -> int:
    """Compare strings treating embedded numbers by value.

    ``"file2"`` sorts before ``"file10"`` and ``"007"`` ties with ``"7"``.
    Text between numbers is compared with ``collate``; once either side has
    no number left the remainders are collated as plain strings.
    """
    pos1 = 0
    pos2 = 0
    while pos1 < len(first) or pos2 < len(second):
        rest1 = first[pos1:]
        rest2 = second[pos2:]
        match1 = NUMBER_RUN_RE.search(rest1)
        match2 = NUMBER_RUN_RE.search(rest2)
        if match1 is None or match2 is None:
            return _sign(collate(rest1, rest2))

        comp = _sign(collate(rest1[: match1.start()], rest2[: match2.start()]))
        if comp != 0:
            return comp

        num1 = parse_number_run(match1.group(0))
        num2 = parse_number_run(match2.group(0))
        comp = (num1 > num2) - (num1 < num2)
        if comp != 0:
            return comp

        pos1 += match1.end()
        pos2 += match2.end()
    return 0

