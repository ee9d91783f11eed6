"""Command line interface for checking and normalizing entity files.

Usage:
    ttrpg-entities validate monster bestiary.json --strict
    ttrpg-entities normalize spell fireball.json --indent 2
    ttrpg-entities schema monster
    ttrpg-entities fixture spell
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence

from ttrpg_entities import __version__
from ttrpg_entities.codec import EntityKind, encode, load_all
from ttrpg_entities.core.config import get_settings
from ttrpg_entities.core.exceptions import EntitiesError
from ttrpg_entities.core.logging import configure_logging, get_logger
from ttrpg_entities.fixtures import fixture_names, fixture_text
from ttrpg_entities.schema import json_schema


logger = get_logger(__name__)

KIND_CHOICES = [kind.value for kind in EntityKind]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ttrpg-entities",
        description="Validate, normalize and describe monster and spell payloads",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser("validate", help="Check that a file decodes")
    validate.add_argument("kind", choices=KIND_CHOICES)
    validate.add_argument("path", help="JSON file with one entity or an array")
    validate.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Reject enumeration values other than the documented codes",
    )

    normalize = subparsers.add_parser(
        "normalize",
        help="Decode a file and print its canonical JSON",
    )
    normalize.add_argument("kind", choices=KIND_CHOICES)
    normalize.add_argument("path", help="JSON file with one entity or an array")
    normalize.add_argument("--strict", action="store_true", default=None)
    output_group = normalize.add_mutually_exclusive_group()
    output_group.add_argument("--indent", type=int, default=None, help="JSON indentation")
    output_group.add_argument("--compact", action="store_true", help="Single-line JSON")

    schema = subparsers.add_parser("schema", help="Print the JSON Schema for a kind")
    schema.add_argument("kind", choices=KIND_CHOICES)

    fixture = subparsers.add_parser("fixture", help="Print a documented example payload")
    fixture.add_argument("name", choices=fixture_names())

    return parser


def _run_validate(args: argparse.Namespace) -> int:
    entities = load_all(args.path, args.kind, strict=args.strict)
    print(f"OK: {len(entities)} {args.kind} payload(s) in {args.path}")
    return 0


def _run_normalize(args: argparse.Namespace) -> int:
    entities = load_all(args.path, args.kind, strict=args.strict)
    for entity in entities:
        print(encode(entity, indent=args.indent, compact=args.compact))
    return 0


def _run_schema(args: argparse.Namespace) -> int:
    print(json.dumps(json_schema(args.kind), indent=2))
    return 0


def _run_fixture(args: argparse.Namespace) -> int:
    print(fixture_text(args.name), end="")
    return 0


COMMANDS = {
    "validate": _run_validate,
    "normalize": _run_normalize,
    "schema": _run_schema,
    "fixture": _run_fixture,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for CLI usage.

    Returns:
        Process exit status: 0 on success, 1 on a library error.
    """
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
        configure_logging(
            level="DEBUG" if args.verbose else settings.log_level,
            json_format=settings.log_json,
        )
        return COMMANDS[args.command](args)
    except EntitiesError as exc:
        logger.debug("command_failed", command=args.command, error=repr(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
