from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List

from .config import RuleConfig, find_config, load_rule_config
from .engine import run_check
from .errors import IGOUserError
from .formatting import FORMATS, format_result
from .jsonic import dumps as jdumps
from .options import CHECK_DOT, CHECK_EMPTY_LINE, CHECK_INDEX, CHECK_ORDER
from .rule import RULE_METADATA
from .version import tool_version

logger = logging.getLogger("igo")

# CLI flag → option it switches off
_DISABLE_FLAGS = {
    "no_check_dot": CHECK_DOT,
    "no_check_index": CHECK_INDEX,
    "no_check_empty_line": CHECK_EMPTY_LINE,
    "no_check_order": CHECK_ORDER,
}


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose or os.environ.get("IGO_DEBUG") else logging.INFO
    logger.setLevel(level)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stderr)
        h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="igo",
        description="Import group ordering checker for TypeScript/JavaScript",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {tool_version()}")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp_check = sub.add_parser("check", help="check import ordering of files and directories")
    sp_check.add_argument(
        "paths",
        nargs="*",
        default=["."],
        help="files or directories to check (default: current directory)",
    )
    sp_check.add_argument(
        "--config",
        metavar="FILE",
        help="YAML config file (default: igo.yaml or .igo.yaml in the current directory)",
    )
    sp_check.add_argument(
        "--format",
        choices=FORMATS,
        default="prose",
        help="output format",
    )
    sp_check.add_argument("--no-check-dot", action="store_true", help="allow './..' prefix")
    sp_check.add_argument("--no-check-index", action="store_true", help="allow '/index' suffix")
    sp_check.add_argument(
        "--no-check-empty-line",
        action="store_true",
        help="do not require empty line between import groups",
    )
    sp_check.add_argument(
        "--no-check-order",
        action="store_true",
        help="do not check distance order of non-local imports",
    )
    sp_check.add_argument("--verbose", action="store_true", help="debug logging to stderr")

    sub.add_parser("rule", help="rule metadata (JSON)")

    return p


def _rule_config(ns: argparse.Namespace, root: Path) -> RuleConfig:
    cfg_path = Path(ns.config) if ns.config else find_config(root)
    cfg = load_rule_config(cfg_path)

    disabled = [opt for flag, opt in _DISABLE_FLAGS.items() if getattr(ns, flag, False)]
    if disabled:
        cfg = RuleConfig(enabled=cfg.enabled, options=cfg.options.disable(*disabled))
    return cfg


def _check(ns: argparse.Namespace) -> int:
    root = Path.cwd()
    cfg = _rule_config(ns, root)
    targets: List[Path] = [Path(p) for p in ns.paths]

    result = run_check(root, targets, cfg)
    sys.stdout.write(format_result(result, ns.format))

    if result.total_violations:
        logger.debug("%d violation(s) in %d file(s)", result.total_violations, result.total_files)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(bool(getattr(ns, "verbose", False)))

    try:
        if ns.cmd == "check":
            return _check(ns)

        if ns.cmd == "rule":
            sys.stdout.write(jdumps(RULE_METADATA.to_dict()) + "\n")
            return 0

    except IGOUserError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
