#!/usr/bin/env python3
"""Simple runner: interpolate a CSV of X,Y,Value samples and export map JSON."""
import sys
from pathlib import Path

repo_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(repo_root / "src"))

from isoline_map.cli import main  # noqa: E402

if __name__ == "__main__":
    raise SystemExit(main())
