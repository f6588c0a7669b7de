"""
TypeScript / JavaScript import declarations using Tree-sitter AST.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from tree_sitter import Language, Node

from ..types import DeclarationInput, Span
from .tree_sitter_support import TreeSitterDocument

QUERIES = {
    # Import statements (top level and inside ambient module blocks)
    "imports": """
    (import_statement) @import
    """,
}

# Nodes that belong to a declaration's leading trivia
TRIVIA_NODE_TYPES = {"comment", "html_comment"}


class TypeScriptDocument(TreeSitterDocument):

    def get_language(self) -> Language:
        import tree_sitter_typescript as tsts
        if self.ext == "tsx":
            # TS and TSX have two different grammars in one package
            return Language(tsts.language_tsx())
        return Language(tsts.language_typescript())

    def get_query_definitions(self) -> Dict[str, str]:
        return QUERIES


class JavaScriptDocument(TreeSitterDocument):

    def get_language(self) -> Language:
        import tree_sitter_javascript as tsjs
        return Language(tsjs.language())

    def get_query_definitions(self) -> Dict[str, str]:
        return QUERIES


def _content_end_byte(node: Node) -> int:
    """
    End of the last token of a node, trailing comments excluded.

    Without a semicolon a same-line comment is parsed into the statement.
    """
    children = [c for c in node.children if c.type not in TRIVIA_NODE_TYPES and c.end_byte > c.start_byte]
    if not children:
        return node.end_byte
    return _content_end_byte(children[-1])


def _previous_token_end(node: Node) -> int:
    """
    Byte offset where the declaration's leading trivia begins.

    That is the end of the last token of the closest preceding sibling which
    is not a comment, or the start of the file when there is none.
    """
    prev = node.prev_sibling
    while prev is not None and prev.type in TRIVIA_NODE_TYPES:
        prev = prev.prev_sibling
    if prev is not None:
        return _content_end_byte(prev)
    parent = node.parent
    if parent is not None and parent.parent is not None:
        return _previous_token_end(parent)
    return 0


def _parse_declaration(doc: TreeSitterDocument, node: Node) -> Optional[DeclarationInput]:
    source = node.child_by_field_name("source")
    if source is None or source.type != "string":
        # import x = require('y') is not an import declaration
        return None

    start_char = doc.byte_to_char_position(node.start_byte)
    end_char = doc.byte_to_char_position(_content_end_byte(node))
    trivia = doc.get_byte_slice_text(_previous_token_end(node), node.start_byte)

    return DeclarationInput(
        specifier_text=doc.get_node_text(source),
        span=Span(start=start_char, width=end_char - start_char),
        leading_trivia=trivia,
    )


def extract_import_declarations(doc: TreeSitterDocument) -> List[DeclarationInput]:
    """
    Collect import declarations of a document in source order.

    Returns:
        One DeclarationInput per import declaration with a string source
    """
    nodes = [node for node, _ in doc.query("imports")]
    nodes.sort(key=lambda n: n.start_byte)

    results: List[DeclarationInput] = []
    for node in nodes:
        decl = _parse_declaration(doc, node)
        if decl is not None:
            results.append(decl)
    return results


__all__ = [
    "TypeScriptDocument",
    "JavaScriptDocument",
    "extract_import_declarations",
]
