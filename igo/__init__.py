"""
Import group ordering checker for TypeScript and JavaScript sources.

Libraries first, then imports escaping the current directory (most distant
first), then imports inside it; groups divided by an empty line.
"""

from __future__ import annotations

from .classifier import classify, classify_declaration
from .options import RULE_NAME, RuleOptions
from .rule import RULE_METADATA, Rule
from .types import ClassifiedImport, DeclarationInput, ImportGroup, Span, Violation, ViolationKind
from .validator import validate_sequence

__all__ = [
    "RULE_NAME",
    "RULE_METADATA",
    "Rule",
    "RuleOptions",
    "ImportGroup",
    "ViolationKind",
    "Span",
    "DeclarationInput",
    "ClassifiedImport",
    "Violation",
    "classify",
    "classify_declaration",
    "validate_sequence",
]
