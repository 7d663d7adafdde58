"""Persistent JSON config helpers.

Stores the collation locale, date column format, and empty-result message.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import locale
import logging
from pathlib import Path

from platformdirs import user_config_dir

from ..listing_model.rendering import DEFAULT_DATE_FORMAT

logger = logging.getLogger(__name__)

APP_NAME = "filelisting"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_NO_RESULTS_MESSAGE = "No results"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except Exception as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored so a read-only config
    directory never breaks listing output.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def _load_nonempty_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _save_string(key: str, value: str) -> None:
    stripped = str(value).strip()
    if not stripped:
        return
    config = load_config()
    config[key] = stripped
    save_config(config)


def load_date_format() -> str:
    """Load the strftime pattern for the date column."""
    return _load_nonempty_string("date_format") or DEFAULT_DATE_FORMAT


def save_date_format(date_format: str) -> None:
    _save_string("date_format", date_format)


def load_collation_locale() -> str | None:
    """Load the locale name used for ``LC_COLLATE``, ``None`` when unset."""
    return _load_nonempty_string("collation_locale")


def save_collation_locale(locale_name: str) -> None:
    _save_string("collation_locale", locale_name)


def load_no_results_message() -> str:
    return _load_nonempty_string("no_results_message") or DEFAULT_NO_RESULTS_MESSAGE


def apply_collation_locale(locale_name: str | None) -> bool:
    """Switch ``LC_COLLATE`` for name comparison.

    ``None`` selects the environment default. Unknown locales are logged and
    leave the current collation unchanged.
    """
    try:
        locale.setlocale(locale.LC_COLLATE, locale_name or "")
    except locale.Error as exc:
        logger.warning("unsupported collation locale %r: %s", locale_name, exc)
        return False
    return True
