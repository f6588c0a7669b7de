from __future__ import annotations

from .fs import SKIP_DIRS, build_gitignore_spec, iter_files, read_text

__all__ = ["SKIP_DIRS", "build_gitignore_spec", "iter_files", "read_text"]
