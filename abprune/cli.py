"""Command-line entry point: read a tree file, search it, print the result.

Usage:
    python -m abprune tree.txt
    python -m abprune --config solver.yaml --show-tree
    abprune tree.txt --reject-duplicates --log-level DEBUG

Output is one line ``from to value`` followed by one ``parent child kind``
line per pruned subtree.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

import yaml

from .config import LOG_LEVELS, SolverConfig
from .exceptions import ConfigError, NoRootFoundError, TreeBuildError
from .formatting import format_result, format_tree
from .logging_config import setup_logging
from .records import read_records
from .search import search_tree
from .tree import build

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="abprune",
        description="Alpha-beta search over a game tree file, reporting the best move and pruned branches.",
    )
    parser.add_argument("tree_file", nargs="?", default=None, help="Tree file (default: tree.txt)")
    parser.add_argument("--config", default=None, help="YAML config file")
    parser.add_argument("--log-level", default=None, type=str.upper, choices=LOG_LEVELS, help="Logging level")
    parser.add_argument("--log-json", action="store_true", default=None, help="Emit logs as JSON")
    parser.add_argument(
        "--allow-multiple-roots",
        action="store_true",
        default=None,
        help="Use the first root when several nodes have no parent",
    )
    parser.add_argument(
        "--reject-duplicates",
        action="store_true",
        default=None,
        help="Fail on repeated node ids instead of keeping the last record",
    )
    parser.add_argument("--show-tree", action="store_true", default=None, help="Print the tree outline to stderr")
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> SolverConfig:
    """Load the YAML config (if any) and apply command-line overrides.

    CLI arguments take precedence over YAML values.
    """
    config = SolverConfig.from_yaml(args.config) if args.config else SolverConfig()

    overrides = {
        "tree_file": args.tree_file,
        "log_level": args.log_level,
        "log_json": args.log_json,
        "allow_multiple_roots": args.allow_multiple_roots,
        "reject_duplicates": args.reject_duplicates,
        "show_tree": args.show_tree,
    }
    for name, value in overrides.items():
        if value is not None:
            setattr(config, name, value)

    config.validate()
    return config


def run(config: SolverConfig) -> str:
    """Read, build and search the configured tree; return the formatted result."""
    records = read_records(config.tree_file)
    tree = build(records, config.build_options())
    if config.show_tree:
        print(format_tree(tree), file=sys.stderr)
    return format_result(search_tree(tree))


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        config = load_config(args)
    except (ConfigError, OSError, yaml.YAMLError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1

    setup_logging(config.log_level, format_json=config.log_json, stream=sys.stderr)

    try:
        output = run(config)
    except NoRootFoundError:
        print("No root found!", file=sys.stderr)
        return 1
    except TreeBuildError as exc:
        print(f"Cannot build tree: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        logger.debug("Failed to read %s", config.tree_file, exc_info=True)
        print(f"Error reading file: {exc}", file=sys.stderr)
        return 1
    except RecursionError:
        print("Tree too deep to search within the interpreter recursion limit", file=sys.stderr)
        return 1

    print(output)
    return 0


__all__ = ["load_config", "main", "parse_args", "run"]
