"""
Rule configuration loader.

Accepted shapes of the YAML document:

    check-dot: false                  # flat option flags

    import-group-ordering:            # keyed by rule name: true/false,
      check-index: false              # a mapping of flags or [enabled, {flags}]

    rules:                            # lint-config style, same values as above
      import-group-ordering: [true, {check-empty-line: false}]
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ..errors import ConfigError
from ..options import RULE_NAME, RuleOptions
from .model import DEFAULT_RULE_CONFIG, RuleConfig

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")


def _read_yaml_map(path: Path) -> dict:
    """Read a YAML file into a dict; an empty file gives an empty dict."""
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")
    return raw


def _rule_value(value: Any, where: str) -> RuleConfig:
    if value is None:
        return DEFAULT_RULE_CONFIG

    if isinstance(value, bool):
        return RuleConfig(enabled=value)

    if isinstance(value, dict):
        return RuleConfig(enabled=True, options=RuleOptions.from_dict(value))

    if isinstance(value, list):
        if not value or not isinstance(value[0], bool):
            raise ConfigError(f"{where}: expected [true|false, {{options}}], got {value!r}")
        if len(value) > 2:
            raise ConfigError(f"{where}: expected at most two items, got {len(value)}")
        options = value[1] if len(value) == 2 else None
        if options is not None and not isinstance(options, dict):
            raise ConfigError(f"{where}: options must be a mapping, got {type(options).__name__}")
        return RuleConfig(enabled=value[0], options=RuleOptions.from_dict(options))

    raise ConfigError(f"{where}: expected bool, mapping or list, got {type(value).__name__}")


def rule_config_from_raw(raw: Optional[dict], source: str = "<config>") -> RuleConfig:
    """
    Build RuleConfig from an already parsed configuration mapping.

    Args:
        raw: Parsed YAML document
        source: Name used in error messages
    """
    if not raw:
        return DEFAULT_RULE_CONFIG

    rules = raw.get("rules")
    if rules is not None:
        if not isinstance(rules, dict):
            raise ConfigError(f"{source}: 'rules' must be a mapping")
        if RULE_NAME not in rules:
            logger.debug("%s: no '%s' entry under 'rules', using defaults", source, RULE_NAME)
            return DEFAULT_RULE_CONFIG
        return _rule_value(rules[RULE_NAME], f"{source}: rules.{RULE_NAME}")

    if RULE_NAME in raw:
        return _rule_value(raw[RULE_NAME], f"{source}: {RULE_NAME}")

    # Flat mapping of option flags
    return RuleConfig(enabled=True, options=RuleOptions.from_dict(raw))


def load_rule_config(path: Optional[Path]) -> RuleConfig:
    """
    Load rule configuration from a YAML file.

    Args:
        path: Config file; None means no config file (defaults)

    Raises:
        ConfigError: If the file is missing, unreadable or malformed
    """
    if path is None:
        logger.debug("No config file, using defaults")
        return DEFAULT_RULE_CONFIG
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading config from %s", path)
    return rule_config_from_raw(_read_yaml_map(path), source=str(path))


__all__ = ["load_rule_config", "rule_config_from_raw"]
