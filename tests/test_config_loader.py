import textwrap
from pathlib import Path

import pytest

from igo.config import DEFAULT_RULE_CONFIG, find_config, load_rule_config, rule_config_from_raw
from igo.errors import ConfigError
from tests.infrastructure.file_utils import write


def _cfg(tmp_path: Path, text: str, name: str = "igo.yaml") -> Path:
    return write(tmp_path / name, textwrap.dedent(text).lstrip())


def test_no_config_gives_defaults():
    assert load_rule_config(None) == DEFAULT_RULE_CONFIG


def test_empty_file_gives_defaults(tmp_path: Path):
    assert load_rule_config(_cfg(tmp_path, "")) == DEFAULT_RULE_CONFIG


def test_flat_options(tmp_path: Path):
    cfg = load_rule_config(_cfg(tmp_path, """
        check-dot: false
        check-empty-line: false
    """))
    assert cfg.enabled is True
    assert cfg.options.check_dot is False
    assert cfg.options.check_empty_line is False
    assert cfg.options.check_index is True


def test_rule_keyed_mapping(tmp_path: Path):
    cfg = load_rule_config(_cfg(tmp_path, """
        import-group-ordering:
          check-index: false
    """))
    assert cfg.enabled is True
    assert cfg.options.check_index is False


def test_rule_keyed_bool(tmp_path: Path):
    assert load_rule_config(_cfg(tmp_path, "import-group-ordering: false\n")).enabled is False
    assert load_rule_config(_cfg(tmp_path, "import-group-ordering: true\n")) == DEFAULT_RULE_CONFIG


def test_rules_list_style(tmp_path: Path):
    cfg = load_rule_config(_cfg(tmp_path, """
        rules:
          import-group-ordering: [true, {check-order-within-group: false}]
    """))
    assert cfg.enabled is True
    assert cfg.options.check_order_within_group is False
    assert cfg.options.check_dot is True


def test_rules_list_without_options():
    cfg = rule_config_from_raw({"rules": {"import-group-ordering": [False]}})
    assert cfg.enabled is False


def test_rules_without_entry_gives_defaults():
    assert rule_config_from_raw({"rules": {"other-rule": True}}) == DEFAULT_RULE_CONFIG


@pytest.mark.parametrize("raw", [
    {"import-group-ordering": "yes"},
    {"import-group-ordering": []},
    {"import-group-ordering": ["true"]},
    {"import-group-ordering": [True, {}, {}]},
    {"import-group-ordering": [True, "check-dot"]},
    {"rules": ["import-group-ordering"]},
])
def test_malformed_rule_value(raw):
    with pytest.raises(ConfigError):
        rule_config_from_raw(raw)


def test_invalid_yaml(tmp_path: Path):
    path = _cfg(tmp_path, "check-dot: [unclosed\n")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_rule_config(path)


def test_root_must_be_mapping(tmp_path: Path):
    with pytest.raises(ConfigError, match="mapping"):
        load_rule_config(_cfg(tmp_path, "- check-dot\n"))


def test_missing_explicit_file(tmp_path: Path):
    with pytest.raises(ConfigError, match="not found"):
        load_rule_config(tmp_path / "nope.yaml")


def test_find_config_order(tmp_path: Path):
    assert find_config(tmp_path) is None

    hidden = _cfg(tmp_path, "check-dot: false\n", name=".igo.yaml")
    assert find_config(tmp_path) == hidden.resolve()

    visible = _cfg(tmp_path, "check-index: false\n")
    assert find_config(tmp_path) == visible.resolve()
