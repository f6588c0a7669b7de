"""
Sequence validation of import declarations.

Imports are visited once, in source order. Each import is checked on its own
spelling and against the import right before it; nothing else is remembered.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .classifier import classify_declaration
from .options import DEFAULT_OPTIONS, RuleOptions
from .types import ClassifiedImport, DeclarationInput, ImportGroup, Violation, ViolationKind


def _self_checks(current: ClassifiedImport, options: RuleOptions) -> List[ViolationKind]:
    kinds: List[ViolationKind] = []
    if options.check_dot and current.specifier.startswith("./.."):
        kinds.append(ViolationKind.SUPERFLUOUS_DOT_PREFIX)
    if options.check_index and current.specifier.endswith("/index"):
        kinds.append(ViolationKind.REDUNDANT_INDEX_SUFFIX)
    return kinds


def _pairwise_checks(last: ClassifiedImport, current: ClassifiedImport, options: RuleOptions) -> List[ViolationKind]:
    kinds: List[ViolationKind] = []

    if last.group > ImportGroup.LIBRARY and current.group == ImportGroup.LIBRARY:
        kinds.append(ViolationKind.GROUP_PRECEDENCE_LIBRARY)

    if last.group > ImportGroup.NON_LOCAL and current.group == ImportGroup.NON_LOCAL:
        kinds.append(ViolationKind.GROUP_PRECEDENCE_NON_LOCAL)

    if options.check_empty_line:
        if last.group != current.group and not current.preceded_by_blank_line:
            kinds.append(ViolationKind.MISSING_GROUP_SEPARATOR)

    if options.check_order_within_group:
        # Most distant first; equal depths keep any order
        both_non_local = last.group == ImportGroup.NON_LOCAL and current.group == ImportGroup.NON_LOCAL
        if both_non_local and last.depth < current.depth:
            kinds.append(ViolationKind.WITHIN_GROUP_ORDER)

    return kinds


def validate_sequence(
    declarations: Iterable[DeclarationInput],
    options: Optional[RuleOptions] = None,
) -> List[Violation]:
    """
    Check the import declarations of one file.

    Args:
        declarations: Import declarations in source order
        options: Check toggles; all checks enabled when omitted

    Returns:
        Violations in the order they were found. Several violations
        may point at the same declaration.
    """
    options = options or DEFAULT_OPTIONS
    violations: List[Violation] = []
    last: Optional[ClassifiedImport] = None

    for decl in declarations:
        current = classify_declaration(decl)

        kinds = _self_checks(current, options)
        if last is not None:
            kinds.extend(_pairwise_checks(last, current, options))

        for kind in kinds:
            violations.append(Violation(kind=kind, span=current.span, specifier=current.specifier))

        last = current

    return violations


__all__ = ["validate_sequence"]
