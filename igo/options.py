"""
Options of the import ordering rule.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional

from .errors import ConfigError

logger = logging.getLogger(__name__)

RULE_NAME = "import-group-ordering"

# Option names as they are spelled in configuration files
CHECK_DOT = "check-dot"
CHECK_INDEX = "check-index"
CHECK_EMPTY_LINE = "check-empty-line"
CHECK_ORDER = "check-order-within-group"

OPTION_NAMES = (CHECK_DOT, CHECK_INDEX, CHECK_EMPTY_LINE, CHECK_ORDER)

_FIELD_BY_OPTION = {
    CHECK_DOT: "check_dot",
    CHECK_INDEX: "check_index",
    CHECK_EMPTY_LINE: "check_empty_line",
    CHECK_ORDER: "check_order_within_group",
}


@dataclass(frozen=True)
class RuleOptions:
    """
    Toggles of the optional checks. Group precedence checks are always on.
    """
    check_dot: bool = True
    check_index: bool = True
    check_empty_line: bool = True
    check_order_within_group: bool = True

    @staticmethod
    def from_dict(d: Optional[Mapping[str, Any]]) -> RuleOptions:
        """
        Load options from a configuration mapping.

        Only a literal ``false`` disables a check; a missing key or
        any other value keeps it enabled.
        """
        if d is None:
            return RuleOptions()
        if not isinstance(d, Mapping):
            raise ConfigError(f"Rule options must be a mapping, got {type(d).__name__}")

        unknown = sorted(str(k) for k in d.keys() if k not in _FIELD_BY_OPTION)
        if unknown:
            logger.warning("Ignoring unknown import-group-ordering option(s): %s", ", ".join(unknown))

        kwargs = {field: d.get(name) is not False for name, field in _FIELD_BY_OPTION.items()}
        return RuleOptions(**kwargs)

    def to_dict(self) -> Dict[str, bool]:
        return {name: getattr(self, field) for name, field in _FIELD_BY_OPTION.items()}

    def disable(self, *names: str) -> RuleOptions:
        """Copy with the named checks (dashed names) switched off."""
        changes = {}
        for name in names:
            if name not in _FIELD_BY_OPTION:
                raise ValueError(f"Unknown option: {name}")
            changes[_FIELD_BY_OPTION[name]] = False
        return replace(self, **changes)


DEFAULT_OPTIONS = RuleOptions()


__all__ = [
    "RULE_NAME",
    "CHECK_DOT",
    "CHECK_INDEX",
    "CHECK_EMPTY_LINE",
    "CHECK_ORDER",
    "OPTION_NAMES",
    "RuleOptions",
    "DEFAULT_OPTIONS",
]
