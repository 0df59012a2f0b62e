#!/usr/bin/env python3
# run_truth_table.py
# This file is part of Tabula - A Propositional Truth Table Evaluator
#
# Command-line interface for truth table generation with configurable logging levels

import sys
import argparse

from truthtable.session import Session
from utils.logger import configure_logging, get_logger


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Tabula propositional truth table evaluator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_truth_table.py
  python run_truth_table.py -e "A -> B"
  python run_truth_table.py -e "(A v B) ^ C" --expression="-A <-> B"
  python run_truth_table.py -- "-A <-> B" "A -> -B"
  python run_truth_table.py --exit-on-error --debug

Formula syntax:
  Variables are single uppercase letters. Operators:
    -  negate     ^  and     v  or     ->  conditional     <->  equivalent
  Type 'help' at the prompt for the legend and 'exit' to quit.
        """,
    )

    parser.add_argument(
        "-e",
        "--expression",
        action="append",
        metavar="FORMULA",
        help="Print the table of FORMULA and exit (may be repeated)",
    )

    parser.add_argument(
        "formulas",
        nargs="*",
        metavar="FORMULA",
        help="Formulas to print, like -e (place after -- when one starts with -)",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser.add_argument(
        "--exit-on-error",
        action="store_true",
        help="Terminate with status 1 at the first malformed formula",
    )

    return parser


def main(argv=None) -> int:
    """Main entry point for the truth table application.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    session = Session(exit_on_error=args.exit_on_error)

    try:
        expressions = (args.expression or []) + args.formulas
        if expressions:
            return session.run_lines(expressions)
        return session.run()

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return 4


if __name__ == "__main__":
    sys.exit(main())
