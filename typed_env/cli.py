"""
ABOUTME: Command-line interface for inspecting typed environment variables
ABOUTME: Resolves NAME:TYPE[=DEFAULT] specs against the environment and reports values and parse failures
"""

import argparse
import json
import logging
import os
import sys
from datetime import timedelta
from typing import Any, NamedTuple

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from . import __version__
from .accessors import EnvReader
from .config import load_environment
from .exceptions import ConfigError
from .parsers import (
    parse_bool,
    parse_duration,
    parse_float64,
    parse_int,
    parse_int64,
    parse_uint,
    parse_uint64,
)

console = Console()
err_console = Console(stderr=True)

# type name -> (EnvReader method, default parser, zero value)
TYPES = {
    "bool": ("get_bool", parse_bool, False),
    "duration": ("get_duration", parse_duration, timedelta(0)),
    "float64": ("get_float64", parse_float64, 0.0),
    "int64": ("get_int64", parse_int64, 0),
    "int": ("get_int", parse_int, 0),
    "string": ("get_string", str, ""),
    "uint64": ("get_uint64", parse_uint64, 0),
    "uint": ("get_uint", parse_uint, 0),
}


class VariableSpec(NamedTuple):
    name: str
    type_name: str
    default: Any


def parse_spec(text: str) -> VariableSpec:
    """
    Parse a NAME:TYPE[=DEFAULT] command-line spec.

    An omitted or empty DEFAULT resolves to the zero value of TYPE.

    Raises:
        argparse.ArgumentTypeError: If the spec is malformed, names an unknown type, or its default does not parse.
    """
    name, sep, rest = text.partition(":")
    if not sep or not name:
        raise argparse.ArgumentTypeError(
            f"invalid spec '{text}', expected NAME:TYPE[=DEFAULT]"
        )
    type_name, _, default_text = rest.partition("=")
    if type_name not in TYPES:
        raise argparse.ArgumentTypeError(
            f"unknown type '{type_name}' in '{text}' (choose from {', '.join(TYPES)})"
        )

    _, parse, zero = TYPES[type_name]
    if default_text == "":
        return VariableSpec(name, type_name, zero)
    try:
        default = parse(default_text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(
            f"default '{default_text}' is not a valid {type_name}"
        ) from e
    return VariableSpec(name, type_name, default)


def cli(argv=None) -> argparse.Namespace:
    """
    Parse and return command-line arguments for the typed-env inspection tool.

    Returns:
        argparse.Namespace: Parsed variable specs plus env file, output format and logging options.
    """
    p = argparse.ArgumentParser(
        description="Resolve typed environment variables and report parse failures"
    )
    p.add_argument(
        "specs",
        nargs="+",
        type=parse_spec,
        metavar="NAME:TYPE[=DEFAULT]",
        help=f"Variable to resolve; TYPE is one of {', '.join(TYPES)}",
    )
    p.add_argument(
        "--env-file",
        default=os.getenv("TYPED_ENV_FILE"),
        help="Dotenv file to load before resolving (default: $TYPED_ENV_FILE)",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="Output results in JSON format instead of a rich table",
    )
    p.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"typed-env {__version__}",
    )
    return p.parse_args(argv)


def resolve(specs: list[VariableSpec], reader: EnvReader) -> list[dict]:
    """Resolve each spec through the reader and note where its value came from."""
    rows = []
    for spec in specs:
        method = getattr(reader, TYPES[spec.type_name][0])
        failures_before = len(reader.errors)
        value = method(spec.name, spec.default)

        if reader.environ.get(spec.name, "") == "":
            source = "default"
        elif len(reader.errors) > failures_before:
            source = "default (invalid)"
        else:
            source = "env"
        rows.append(
            {"name": spec.name, "type": spec.type_name, "value": value, "source": source}
        )
    return rows


def _json_value(value: Any) -> Any:
    if isinstance(value, timedelta):
        return value.total_seconds()
    return value


def render_table(rows: list[dict], reader: EnvReader) -> None:
    table = Table(title="Environment variables")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Value")
    table.add_column("Source")
    for row in rows:
        style = "red" if row["source"] == "default (invalid)" else None
        table.add_row(
            Text(row["name"]),
            row["type"],
            Text(str(row["value"])),
            row["source"],
            style=style,
        )
    console.print(table)

    for error in reader.all_errors():
        console.print(f"❌ {error}", style="red", markup=False, soft_wrap=True)


def render_json(rows: list[dict], reader: EnvReader) -> None:
    payload = {
        "values": {row["name"]: _json_value(row["value"]) for row in rows},
        "errors": [
            {
                "name": error.name,
                "type": error.type_label,
                "value": error.value,
                "message": str(error),
            }
            for error in reader.all_errors()
        ],
    }
    print(json.dumps(payload, indent=2))


def main(argv=None):
    """
    Execute the typed-env command.

    Loads the optional env file, resolves every requested variable with a fresh
    reader and prints the results. Exits with status 1 when any variable failed
    to parse, 0 otherwise.
    """
    a = cli(argv)

    logging.basicConfig(
        level=getattr(logging, a.log_level),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
    )

    try:
        if a.env_file and not load_environment(a.env_file):
            raise ConfigError(f"Env file '{a.env_file}' not found")

        reader = EnvReader()
        rows = resolve(a.specs, reader)
        if a.json:
            render_json(rows, reader)
        else:
            render_table(rows, reader)
    except ConfigError as exc:
        err_console.print(f"❌ {exc}", markup=False)
        sys.exit(1)
    except KeyboardInterrupt:
        err_console.print("\n❌ Interrupted by user")
        sys.exit(1)
    except Exception as exc:
        err_console.print(f"❌ Fatal error: {exc}", markup=False)
        logging.exception("Fatal error occurred")
        sys.exit(1)

    sys.exit(1 if reader.errors else 0)


if __name__ == "__main__":
    main()
