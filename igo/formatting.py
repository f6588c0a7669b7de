"""
Output formats for check results.
"""

from __future__ import annotations

from typing import List

from .jsonic import dumps as jdumps
from .report_schema import CheckResult

FORMATS = ("prose", "json")


def format_prose(result: CheckResult) -> str:
    """One line per violation: ERROR: <path>[<line>, <column>]: <message>"""
    lines: List[str] = []
    for file in result.files:
        for v in file.violations:
            lines.append(f"ERROR: {file.path}[{v.line}, {v.column}]: {v.message}")
    return "\n".join(lines) + ("\n" if lines else "")


def format_json(result: CheckResult) -> str:
    return jdumps(result.model_dump(mode="json")) + "\n"


def format_result(result: CheckResult, fmt: str) -> str:
    if fmt == "prose":
        return format_prose(result)
    if fmt == "json":
        return format_json(result)
    raise ValueError(f"Unknown output format: {fmt}")


__all__ = ["FORMATS", "format_prose", "format_json", "format_result"]
