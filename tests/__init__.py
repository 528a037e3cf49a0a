"""Test package for hutlines."""

from __future__ import annotations

import sys
from pathlib import Path


# Lets a plain ``pytest`` run import hutlines from src/ without an install.
_SRC = Path(__file__).resolve().parents[1] / "src"
if _SRC.is_dir() and str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))
