"""
Configuration loading for the import group ordering rule.
"""

from __future__ import annotations

from .load import load_rule_config, rule_config_from_raw
from .model import DEFAULT_RULE_CONFIG, RuleConfig
from .paths import CONFIG_FILES, find_config

__all__ = [
    "RuleConfig",
    "DEFAULT_RULE_CONFIG",
    "CONFIG_FILES",
    "find_config",
    "load_rule_config",
    "rule_config_from_raw",
]
