"""
Rule registration data and the one-call entry point for hosts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .engine import lint_text
from .options import OPTION_NAMES, RULE_NAME, RuleOptions
from .types import Violation


@dataclass(frozen=True)
class RuleMetadata:
    rule_name: str
    description: str
    rationale: str
    options_description: str
    options: Dict[str, Any] = field(default_factory=dict)
    type: str = "typescript"
    typescript_only: bool = False
    has_fix: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "ruleName": self.rule_name,
            "description": self.description,
            "rationale": self.rationale,
            "optionsDescription": self.options_description,
            "options": self.options,
            "type": self.type,
            "typescriptOnly": self.typescript_only,
            "hasFix": self.has_fix,
        }


RULE_METADATA = RuleMetadata(
    rule_name=RULE_NAME,
    description=(
        "Enforces strict order of groups of imports (libraries, non-local, local). "
        "Also provides some other minor import related enforcements."
    ),
    rationale="Helps maintain a readable style in your codebase.",
    options_description="Allow to turn on and off additional checks.",
    options={
        "type": "object",
        "properties": {name: {"type": "boolean"} for name in OPTION_NAMES},
        "additionalProperties": False,
    },
)


class Rule:
    """
    Import group ordering rule bound to a set of options.

    The same instance may be applied to any number of files:
    it keeps no state between calls.
    """

    metadata = RULE_METADATA

    def __init__(self, options: Optional[RuleOptions] = None):
        self.options = options or RuleOptions()

    def apply(self, text: str, ext: str) -> List[Violation]:
        return lint_text(text, ext, self.options)


__all__ = ["RULE_NAME", "RuleMetadata", "RULE_METADATA", "Rule"]
