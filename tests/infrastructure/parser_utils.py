"""
Helpers for building declaration sequences and checking parser availability.
"""

from __future__ import annotations

from typing import List, Union

from igo.types import DeclarationInput, Span


def is_tree_sitter_available() -> bool:
    """Check if Tree-sitter grammars are available for testing."""
    try:
        import tree_sitter
        import tree_sitter_typescript
        import tree_sitter_javascript
        return True
    except ImportError:
        return False


def decl(specifier: str, *, blank_before: bool = False, start: int = 0) -> DeclarationInput:
    """
    Declaration importing `specifier` (quotes added here).

    blank_before puts an empty line into the leading trivia.
    """
    text = f"'{specifier}'"
    return DeclarationInput(
        specifier_text=text,
        span=Span(start=start, width=len(text) + 12),
        leading_trivia="\n\n" if blank_before else "\n",
    )


# A bare string is an import on the next line, a ("", spec) tuple marks
# an empty line before the import.
DeclSpec = Union[str, tuple]


def decls(*items: DeclSpec) -> List[DeclarationInput]:
    """
    Sequence of declarations with distinct starts.

        decls("react", ("", "./local"))
    """
    result: List[DeclarationInput] = []
    for i, item in enumerate(items):
        if isinstance(item, tuple):
            _, spec = item
            result.append(decl(spec, blank_before=True, start=i * 100))
        else:
            result.append(decl(item, start=i * 100))
    return result
