"""Pytest bootstrap for local source imports.

Ensure ``import filelisting`` resolves to the checkout even when the package
is not installed and the ``pytest`` script runs outside the repository root.
"""

from __future__ import annotations

import sys
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parent.parent
PROJECT_ROOT_STR = str(PROJECT_ROOT)

if PROJECT_ROOT_STR not in sys.path:
    sys.path.insert(0, PROJECT_ROOT_STR)
