from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Optional, Set

import pathspec

# Directories never entered while walking
SKIP_DIRS = {".git", "node_modules"}


def read_text(path: Path) -> str:
    with path.open(encoding="utf-8", errors="ignore") as f:
        return f.read()


def build_gitignore_spec(root: Path) -> Optional[pathspec.PathSpec]:
    """
    Build PathSpec from .gitignore. Return None if .gitignore is missing.
    """
    gitignore = root / ".gitignore"
    if not gitignore.is_file():
        return None
    lines = []
    for ln in gitignore.read_text(encoding="utf-8", errors="ignore").splitlines():
        ln = ln.strip()
        if ln and not ln.startswith("#"):
            lines.append(ln)
    return pathspec.GitIgnoreSpec.from_lines(lines)


def iter_files(
    start: Path,
    *,
    root: Path,
    extensions: Set[str],
    spec_git: Optional[pathspec.PathSpec],
) -> Iterable[Path]:
    """
    Recursive file iterator with .gitignore support.

    Args:
        start: Directory to walk
        root: Directory .gitignore patterns are relative to
        extensions: Lower-case suffixes to keep (".ts", ...)
        spec_git: Compiled .gitignore or None
    """
    root = root.resolve()
    for dirpath, dirnames, filenames in os.walk(start.resolve()):
        keep: List[str] = []
        for d in sorted(dirnames):
            if d in SKIP_DIRS:
                continue
            rel_dir = _rel_posix(Path(dirpath, d), root)
            # .gitignore can hide a branch completely
            if spec_git and rel_dir is not None and spec_git.match_file(rel_dir + "/"):
                continue
            keep.append(d)
        dirnames[:] = keep

        for fn in sorted(filenames):
            p = Path(dirpath, fn)
            if p.suffix.lower() not in extensions:
                continue
            rel_posix = _rel_posix(p, root)
            if spec_git and rel_posix is not None and spec_git.match_file(rel_posix):
                continue
            yield p


def _rel_posix(path: Path, root: Path) -> Optional[str]:
    try:
        return path.resolve().relative_to(root).as_posix()
    except ValueError:
        # outside of root: .gitignore does not apply
        return None
