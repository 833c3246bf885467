# Copyright 2026 ProtoSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the ProtoSchema command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from protoschema.config.settings import (
    CONFIG_FILE_NAME,
    STRICT_OPTIONS,
    ConfigError,
    ParserOptions,
    load_parser_options,
)
from protoschema.output.artifact import serialize, write_artifact
from protoschema.output.report import format_summary
from protoschema.parser.errors import SchemaError
from protoschema.parser.parser import parse

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the ProtoSchema CLI."""
    parser = argparse.ArgumentParser(
        prog="protoschema",
        description="ProtoSchema: parse message and enum schema files",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # parse subcommand
    parse_parser = subparsers.add_parser(
        "parse",
        help="Parse a schema file and print its contents",
        description="Parse a schema file and print the messages and enums it declares.",
    )
    parse_parser.add_argument("file", help="Schema source file to parse")
    parse_parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format (default: text)",
    )
    parse_parser.add_argument(
        "-o",
        "--output",
        help="Write the JSON artifact to this path instead of printing",
    )
    parse_parser.add_argument(
        "--config",
        help=f"Parser configuration file (default: ./{CONFIG_FILE_NAME} if present)",
    )
    parse_parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject unterminated strings and fields marked both repeated and optional",
    )

    args = parser.parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s - %(name)s - %(message)s")
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "parse":
        return _cmd_parse(args)
    return 0


def _cmd_parse(args: argparse.Namespace) -> int:
    """Handle the parse subcommand."""
    source_path = Path(args.file)
    if not source_path.is_file():
        print(f"Error: file '{source_path}' does not exist.", file=sys.stderr)
        return 1

    try:
        options = _resolve_options(args)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        source = source_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: cannot read '{source_path}': {exc}", file=sys.stderr)
        return 1

    try:
        schema = parse(source, options)
    except SchemaError as exc:
        print(f"Error: {source_path}: {exc}", file=sys.stderr)
        return 1

    if args.output:
        try:
            write_artifact(schema, Path(args.output))
        except OSError as exc:
            print(f"Error: cannot write '{args.output}': {exc}", file=sys.stderr)
            return 1
        print(f"Wrote artifact to '{args.output}'.")
    elif args.format == "json":
        print(serialize(schema))
    else:
        print(format_summary(schema), end="")
    return 0


def _resolve_options(args: argparse.Namespace) -> ParserOptions:
    """Pick parser options from --strict, --config, or the default config file."""
    if args.strict:
        return STRICT_OPTIONS
    if args.config:
        return load_parser_options(Path(args.config))
    default_config = Path.cwd() / CONFIG_FILE_NAME
    if default_config.exists():
        return load_parser_options(default_config)
    return ParserOptions()
