#!/usr/bin/env python3
# run_simplify.py
# This file is part of Veritas - A Boolean Expression Simplifier
#
# Command-line interface for the expression engine with configurable logging levels

import argparse
import json
import sys
from typing import List, Optional

from core import EngineConfig, Language, simplify, simplify_and_table, table
from logic.truth_table import HideMode, SortMode
from utils.logger import configure_logging, get_logger


def build_config(args: argparse.Namespace) -> EngineConfig:
    """Translate parsed command line options into an engine configuration.

    Args:
        args: Parsed arguments

    Returns:
        EngineConfig for this invocation
    """
    return EngineConfig(
        simplify=not args.no_simplify,
        case_sensitive=args.case_sensitive,
        sort=SortMode[args.sort],
        hide=HideMode[args.hide],
        hide_intermediate=args.hide_intermediate,
        language=Language.from_tag(args.lang),
    )


def print_result(result, as_json: bool) -> None:
    """Print an engine result on stdout.

    Args:
        result: Result returned by an engine entry point
        as_json: Emit the result's dictionary form as JSON
    """
    if as_json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return

    if hasattr(result, "after"):
        print(f"Expression: {result.before}")
        for i, step in enumerate(result.operations, start=1):
            print(f"  {i}. {step.rule}: {step.before} → {step.after}")
        print(f"Simplified: {result.after}")

    truth_table = getattr(result, "table", None)
    if truth_table is not None:
        print()
        print(truth_table)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Veritas boolean expression simplifier",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_simplify.py "A and not A"
  python run_simplify.py "A -> B" --table --case-sensitive
  python run_simplify.py "(A | B) & C" --table-only --hide-intermediate
  python run_simplify.py "A & B" --table --sort TRUE_FIRST --json

Operators:
  not: ¬ ! ~ not      and: ⋀ & && ∧ and
  or:  ⋁ | || ∨ or    implies: ➔ -> => → ⇒ implies
        """,
    )

    parser.add_argument("expression", help="Boolean expression to process")

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--table", action="store_true", help="Also print a truth table of the result"
    )
    mode.add_argument(
        "--table-only",
        action="store_true",
        help="Only tabulate the expression as written, without simplifying",
    )

    parser.add_argument(
        "--no-simplify", action="store_true", help="Validate and parse only"
    )

    parser.add_argument(
        "--case-sensitive",
        action="store_true",
        help="Treat variables differing in case as different variables",
    )

    parser.add_argument(
        "--sort",
        choices=[m.name for m in SortMode],
        default=SortMode.DEFAULT.name,
        help="Truth table row order",
    )

    parser.add_argument(
        "--hide",
        choices=[m.name for m in HideMode],
        default=HideMode.NONE.name,
        help="Hide truth table rows whose result is TRUE or FALSE",
    )

    parser.add_argument(
        "--hide-intermediate",
        action="store_true",
        help="Only tabulate variables and the whole expression",
    )

    parser.add_argument(
        "--lang", default="en", help="Language of error messages (en or nb)"
    )

    parser.add_argument("--json", action="store_true", help="Print the result as JSON")

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the expression engine CLI.

    Returns:
        Exit code (0 for success, 2 for an illegal expression)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()
    config = build_config(args)

    if args.table_only:
        result = table(args.expression, config)
    elif args.table:
        result = simplify_and_table(args.expression, config)
    else:
        result = simplify(args.expression, config)

    if not result.ok:
        if args.json:
            print_result(result, as_json=True)
        logger.error(f"{result.kind}: {result.message}")
        return 2

    print_result(result, args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
