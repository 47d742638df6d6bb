"""Wren CLI — check form values against a rule registry.

Entry point registered as ``wren`` in ``pyproject.toml``::

    [project.scripts]
    wren = "wren.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wren`` command."""
    parser = argparse.ArgumentParser(
        prog="wren",
        description="Wren: declarative form field validation.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wren check -------------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate field values")
    check_parser.add_argument(
        "values",
        nargs="*",
        metavar="FIELD=VALUE",
        help="Field values; fields not given are empty",
    )
    check_parser.add_argument(
        "--registry",
        default="wren.signup:build_registry",
        help="Import string of a registry or registry factory (default: %(default)s)",
    )
    check_parser.add_argument(
        "--html",
        action="store_true",
        help="Print the rendered form instead of plain messages",
    )
    check_parser.add_argument(
        "--input-types",
        default="wren.signup:INPUT_TYPES",
        help="Import string of the field to input type mapping used by --html "
        "(default: %(default)s)",
    )
    check_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log each rule failure to stderr",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "check":
        from wren.cli._check import run_check

        run_check(args)
