"""
Lint engine: runs the import ordering rule over texts, files and directories.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from .config.model import DEFAULT_RULE_CONFIG, RuleConfig
from .errors import TargetNotFoundError, UnsupportedLanguageError
from .filtering import build_gitignore_spec, iter_files, read_text
from .options import RULE_NAME, RuleOptions
from .parsing import SUPPORTED_EXTENSIONS, create_document, extract_import_declarations, is_supported
from .report_schema import CheckResult, FileResult, ViolationEntry
from .types import DeclarationInput, Violation
from .validator import validate_sequence

logger = logging.getLogger(__name__)


def line_and_column(text: str, offset: int) -> Tuple[int, int]:
    """1-based (line, column) of a character offset."""
    line_start = text.rfind("\n", 0, offset) + 1
    return text.count("\n", 0, offset) + 1, offset - line_start + 1


def _lint(text: str, ext: str, options: Optional[RuleOptions], name: str) -> Tuple[List[DeclarationInput], List[Violation]]:
    doc = create_document(text, ext)
    if doc.has_error():
        logger.warning("%s: syntax errors found, imports inside broken code may be skipped", name)
    declarations = extract_import_declarations(doc)
    return declarations, validate_sequence(declarations, options)


def lint_text(text: str, ext: str, options: Optional[RuleOptions] = None) -> List[Violation]:
    """
    Check import declarations of a source text.

    Args:
        text: Source code
        ext: File extension selecting the grammar ("ts", ".js", ...)
        options: Check toggles, all enabled by default
    """
    _, violations = _lint(text, ext, options, f"<text.{ext.lstrip('.')}>")
    return violations


def _display_path(path: Path, root: Optional[Path]) -> str:
    if root is not None:
        try:
            return path.resolve().relative_to(root.resolve()).as_posix()
        except ValueError:
            pass
    return path.as_posix()


def _to_entry(text: str, violation: Violation) -> ViolationEntry:
    line, column = line_and_column(text, violation.span.start)
    return ViolationEntry(
        rule=RULE_NAME,
        kind=violation.kind.value,
        message=violation.message,
        specifier=violation.specifier,
        start=violation.span.start,
        width=violation.span.width,
        line=line,
        column=column,
    )


def lint_file(path: Path, options: Optional[RuleOptions] = None, *, root: Optional[Path] = None) -> FileResult:
    """
    Check one file.

    Args:
        path: Source file
        options: Check toggles
        root: Directory reported paths are relative to

    Raises:
        UnsupportedLanguageError: If the file extension has no parser
    """
    shown = _display_path(path, root)
    text = read_text(path)
    declarations, violations = _lint(text, path.suffix, options, shown)
    logger.debug("%s: %d import(s), %d violation(s)", shown, len(declarations), len(violations))
    return FileResult(
        path=shown,
        imports=len(declarations),
        violations=[_to_entry(text, v) for v in violations],
    )


def collect_targets(root: Path, targets: Iterable[Path]) -> List[Path]:
    """
    Expand command line targets into the list of files to check.

    Files are taken as given, directories are walked honoring the root .gitignore.

    Raises:
        TargetNotFoundError: If a target does not exist
        UnsupportedLanguageError: If a file target has an unsupported extension
    """
    spec_git = build_gitignore_spec(root)
    files: List[Path] = []
    seen = set()

    for target in targets:
        target = target if target.is_absolute() else root / target
        if target.is_dir():
            found = iter_files(target, root=root, extensions=set(SUPPORTED_EXTENSIONS), spec_git=spec_git)
        elif target.is_file():
            if not is_supported(target):
                raise UnsupportedLanguageError(f"Unsupported file type: {target}")
            found = [target]
        else:
            raise TargetNotFoundError(f"Path not found: {target}")

        for p in found:
            key = p.resolve()
            if key not in seen:
                seen.add(key)
                files.append(p)

    return files


def run_check(root: Path, targets: Iterable[Path], rule_config: Optional[RuleConfig] = None) -> CheckResult:
    """
    Check every supported file under the targets.

    Args:
        root: Project root (.gitignore location, base of reported paths)
        targets: Files and directories, relative paths are resolved against root
        rule_config: Rule configuration; defaults when omitted
    """
    rule_config = rule_config or DEFAULT_RULE_CONFIG
    result = CheckResult(rule=RULE_NAME, enabled=rule_config.enabled, options=rule_config.options.to_dict())

    if not rule_config.enabled:
        logger.info("Rule '%s' is disabled in configuration, nothing to check", RULE_NAME)
        return result

    files = collect_targets(root, targets)
    logger.debug("Checking %d file(s)", len(files))

    results = [lint_file(p, rule_config.options, root=root) for p in files]
    results.sort(key=lambda r: r.path)

    result.files = results
    result.total_files = len(results)
    result.total_violations = sum(len(r.violations) for r in results)
    return result


__all__ = ["line_and_column", "lint_text", "lint_file", "collect_targets", "run_check"]
