"""``wren check`` — validate field values from the command line.

Prints one ``field: message`` line per invalid field, or ``valid``.
Exits with code 1 when any field is invalid, 2 on usage errors.
"""

import argparse
import logging
import sys

from wren.cli._resolve import resolve_input_types, resolve_registry
from wren.errors import ConfigurationError
from wren.forms import Form
from wren.validation.engine import FormValidator


def parse_values(pairs: list[str]) -> dict[str, str]:
    """Parse ``FIELD=VALUE`` arguments. Values may contain ``=``."""
    values: dict[str, str] = {}
    for pair in pairs:
        field, sep, value = pair.partition("=")
        if not sep or not field:
            msg = f"Expected FIELD=VALUE, got {pair!r}"
            raise ValueError(msg)
        values[field] = value
    return values


def run_check(args: argparse.Namespace) -> None:
    """Validate ``args.values`` against the registry named by ``args.registry``."""
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        values = parse_values(args.values)
        registry = resolve_registry(args.registry)
        input_types = resolve_input_types(args.input_types) if args.html else {}
    except (ValueError, ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    form = Form(values)
    result = FormValidator(registry).run(form)

    if args.html:
        from wren.rendering import render_form

        print(render_form(form, registry, input_types))
    elif result:
        print("valid")
    else:
        for field, message in result.errors.items():
            print(f"{field}: {message}")

    if not result:
        raise SystemExit(1)
