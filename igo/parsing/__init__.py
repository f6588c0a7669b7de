from __future__ import annotations

from pathlib import Path
from typing import Dict, Type

from ..errors import UnsupportedLanguageError
from .ecmascript import JavaScriptDocument, TypeScriptDocument, extract_import_declarations
from .tree_sitter_support import TreeSitterDocument

# ext (without dot) → document class
_DOCUMENT_BY_EXT: Dict[str, Type[TreeSitterDocument]] = {
    "ts": TypeScriptDocument,
    "tsx": TypeScriptDocument,
    "mts": TypeScriptDocument,
    "cts": TypeScriptDocument,
    "js": JavaScriptDocument,
    "jsx": JavaScriptDocument,
    "mjs": JavaScriptDocument,
    "cjs": JavaScriptDocument,
}

SUPPORTED_EXTENSIONS = frozenset("." + ext for ext in _DOCUMENT_BY_EXT)


def _normalize_ext(ext: str) -> str:
    return ext.lower().lstrip(".")


def is_supported(path: Path) -> bool:
    return _normalize_ext(path.suffix) in _DOCUMENT_BY_EXT


def create_document(text: str, ext: str) -> TreeSitterDocument:
    """
    Parse text with the grammar matching the file extension.

    Args:
        text: Source text
        ext: File extension, with or without leading dot ("ts", ".tsx")

    Raises:
        UnsupportedLanguageError: If no grammar is registered for the extension
    """
    key = _normalize_ext(ext)
    doc_cls = _DOCUMENT_BY_EXT.get(key)
    if doc_cls is None:
        raise UnsupportedLanguageError(f"No import parser for extension '{ext}'")
    return doc_cls(text, key)


__all__ = [
    "SUPPORTED_EXTENSIONS",
    "TreeSitterDocument",
    "TypeScriptDocument",
    "JavaScriptDocument",
    "create_document",
    "extract_import_declarations",
    "is_supported",
]
