from __future__ import annotations

from pathlib import Path
from typing import Optional

# Config file names looked up in the project root, first found wins.
CONFIG_FILES = ("igo.yaml", ".igo.yaml")


def find_config(root: Path) -> Optional[Path]:
    """Path to the project config file, or None if the project has none."""
    for name in CONFIG_FILES:
        candidate = root / name
        if candidate.is_file():
            return candidate.resolve()
    return None
