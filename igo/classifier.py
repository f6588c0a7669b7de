"""
Import specifier classification.

Pure functions: a specifier is classified by its spelling alone,
nothing is resolved against the file system or other imports.
"""

from __future__ import annotations

import re
from typing import Tuple

from .types import ClassifiedImport, DeclarationInput, ImportGroup

_QUOTES_RE = re.compile(r"^[\"']|[\"']$")
_BLANK_LINE_RE = re.compile(r"^\r?\n\r?\n")

PARENT_HOP = "../"


def strip_quotes(text: str) -> str:
    """Remove one leading and one trailing quote character, if present."""
    return _QUOTES_RE.sub("", text)


def count_parent_hops(specifier: str) -> int:
    """
    Number of '../' occurrences in the specifier.

    Every non-overlapping occurrence counts, not only a leading run:
    './a/../b' has depth 1.
    """
    return specifier.count(PARENT_HOP)


def classify(raw_text: str) -> Tuple[ImportGroup, int]:
    """
    Classify a module specifier into a group and depth.

    Args:
        raw_text: Specifier text, with or without surrounding quotes

    Returns:
        (group, depth) tuple; depth is the number of parent hops,
        always 0 for libraries
    """
    specifier = strip_quotes(raw_text)
    if not specifier.startswith("."):
        return ImportGroup.LIBRARY, 0
    depth = count_parent_hops(specifier)
    if depth == 0:
        return ImportGroup.LOCAL, depth
    return ImportGroup.NON_LOCAL, depth


def has_preceding_blank_line(leading_trivia: str) -> bool:
    """True if the declaration's full text starts with an empty line."""
    return _BLANK_LINE_RE.match(leading_trivia) is not None


def classify_declaration(decl: DeclarationInput) -> ClassifiedImport:
    """Build the classified record for one declaration."""
    group, depth = classify(decl.specifier_text)
    return ClassifiedImport(
        specifier=strip_quotes(decl.specifier_text),
        group=group,
        depth=depth,
        preceded_by_blank_line=has_preceding_blank_line(decl.leading_trivia),
        span=decl.span,
    )


__all__ = [
    "strip_quotes",
    "count_parent_hops",
    "classify",
    "has_preceding_blank_line",
    "classify_declaration",
]
