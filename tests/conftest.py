"""Pytest configuration.

Goal: make `import hydronet` work reliably when running tests without
installing the package (editable install).

This repo uses a flat layout (hydronet/ at repo root), so the repo root is put
on sys.path here.
"""

from __future__ import annotations

import sys
from pathlib import Path


_REPO_ROOT = Path(__file__).resolve().parents[1]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
