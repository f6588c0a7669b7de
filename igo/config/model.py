from __future__ import annotations

from dataclasses import dataclass, field

from ..options import RuleOptions


@dataclass(frozen=True)
class RuleConfig:
    """What a configuration file says about the rule."""
    enabled: bool = True
    options: RuleOptions = field(default_factory=RuleOptions)


DEFAULT_RULE_CONFIG = RuleConfig()
