"""Runtime support shared by command-line entry points (persistent config)."""

from __future__ import annotations

from .config import (
    apply_collation_locale,
    load_collation_locale,
    load_config,
    load_date_format,
    load_no_results_message,
    save_collation_locale,
    save_config,
    save_date_format,
)

__all__ = [
    "load_config",
    "save_config",
    "load_date_format",
    "save_date_format",
    "load_collation_locale",
    "save_collation_locale",
    "load_no_results_message",
    "apply_collation_locale",
]
