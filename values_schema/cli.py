"""Command line entry point: ``values-schema generate CONTEXT_DIR``."""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from . import __version__
from .config import load_settings
from .errors import ValuesSchemaError
from .generator import generate_for_chart
from .logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="values-schema",
        description="Generate a JSON Schema from a Helm chart's values.yaml.",
    )
    parser.add_argument("--config", help="Path to a YAML config file.")
    parser.add_argument(
        "--debug",
        action="store_true",
        default=None,
        help="Enable debug logging of every required-field decision.",
    )
    subparsers = parser.add_subparsers(dest="command")

    generate = subparsers.add_parser(
        "generate",
        help="Generate values.schema.json for a chart directory.",
    )
    generate.add_argument(
        "context",
        nargs="?",
        help="Chart directory containing values.yaml (defaults to the configured context).",
    )
    generate.add_argument(
        "-f",
        "--overrides",
        help="Path, relative to the context directory, of an overrides YAML to merge.",
    )
    generate.add_argument(
        "-o",
        "--output",
        help="Output file name, relative to the context directory.",
    )
    generate.add_argument(
        "--max-depth",
        type=int,
        help="Reject values nested deeper than this.",
    )

    subparsers.add_parser("version", help="Print the version and exit.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "version":
        print(f"values-schema {__version__}")
        return 0

    try:
        settings = load_settings(
            args.config,
            debug=args.debug,
            context=getattr(args, "context", None),
            overrides=getattr(args, "overrides", None),
            output=getattr(args, "output", None),
            max_depth=getattr(args, "max_depth", None),
        )
    except (ValuesSchemaError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    configure_logging(settings.debug)
    if settings.debug:
        logger.debug("Configuration loaded", **settings.model_dump())

    if not settings.context:
        parser.print_help(sys.stderr)
        return 2

    try:
        result = generate_for_chart(
            settings.context,
            overrides_name=settings.overrides or None,
            output_name=settings.output,
            options=settings.generation_options(),
        )
    except ValuesSchemaError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(result.message)
    return 0
