"""
Shared test infrastructure.

Modules:
- file_utils: creating files and directories
- cli_utils: running the CLI in a subprocess
- parser_utils: tree-sitter availability and declaration builders
"""

from .file_utils import write, write_source_file
from .cli_utils import run_cli, jload
from .parser_utils import is_tree_sitter_available, decl, decls

__all__ = [
    "write", "write_source_file",
    "run_cli", "jload",
    "is_tree_sitter_available", "decl", "decls",
]
