from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


# ---- Import groups ----

class ImportGroup(IntEnum):
    """
    Group of an import declaration.

    The order of members is the required order of groups in a file:
    libraries first, then imports escaping the current directory,
    then imports inside it. Precedence checks compare members directly.
    """
    LIBRARY = 0
    NON_LOCAL = 1
    LOCAL = 2


# ---- Violations ----

class ViolationKind(Enum):
    SUPERFLUOUS_DOT_PREFIX = "superfluous-dot-prefix"
    REDUNDANT_INDEX_SUFFIX = "redundant-index-suffix"
    GROUP_PRECEDENCE_LIBRARY = "group-precedence-library"
    GROUP_PRECEDENCE_NON_LOCAL = "group-precedence-non-local"
    MISSING_GROUP_SEPARATOR = "missing-group-separator"
    WITHIN_GROUP_ORDER = "within-group-order"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ViolationKind.SUPERFLUOUS_DOT_PREFIX: "Import must not start with superfluous ./",
    ViolationKind.REDUNDANT_INDEX_SUFFIX: "Import must not end with index",
    ViolationKind.GROUP_PRECEDENCE_LIBRARY: "Libraries must be imported first",
    ViolationKind.GROUP_PRECEDENCE_NON_LOCAL: "Non-local import must come before Local one",
    ViolationKind.MISSING_GROUP_SEPARATOR: (
        "Blocks of Libraries, Local and Non-local imports must be divided by empty line"
    ),
    ViolationKind.WITHIN_GROUP_ORDER: "Non-local imports must be ordered from the most distant the closest",
}


# ---- Declarations ----

@dataclass(frozen=True)
class Span:
    """Character range of a declaration: start offset and width (leading trivia excluded)."""
    start: int
    width: int

    @property
    def end(self) -> int:
        return self.start + self.width


@dataclass(frozen=True)
class DeclarationInput:
    """
    Import declaration as handed over by a parser.

    specifier_text keeps its surrounding quotes.
    leading_trivia is the whitespace and comments between the previous token
    (or the start of the file) and the declaration itself.
    """
    specifier_text: str
    span: Span
    leading_trivia: str = ""


@dataclass(frozen=True)
class ClassifiedImport:
    specifier: str
    group: ImportGroup
    depth: int
    preceded_by_blank_line: bool
    span: Span


@dataclass(frozen=True)
class Violation:
    kind: ViolationKind
    span: Span
    specifier: str

    @property
    def message(self) -> str:
        return self.kind.message


__all__ = [
    "ImportGroup",
    "ViolationKind",
    "Span",
    "DeclarationInput",
    "ClassifiedImport",
    "Violation",
]
