"""
Utilities for creating files and directories in tests.
"""

from __future__ import annotations

import textwrap
from pathlib import Path


def write(p: Path, text: str) -> Path:
    """
    Write text to a file, creating parent directories when needed.

    Args:
        p: File path
        text: Content

    Returns:
        Path of the written file
    """
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
    return p


def write_source_file(p: Path, content: str) -> Path:
    """Write dedented source code, ending with a single newline."""
    return write(p, textwrap.dedent(content).lstrip("\n").rstrip() + "\n")


__all__ = ["write", "write_source_file"]
