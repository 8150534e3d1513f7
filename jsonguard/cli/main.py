"""
jsonguard CLI — Command-line interface for schema validation.

Exit codes:
- 0: valid (or schema compiles)
- 1: instance is invalid
- 2: unreadable input, malformed document or malformed schema
"""

import argparse
import sys

from jsonguard import __version__
from jsonguard.core.config import ValidationMode, ValidatorSettings
from jsonguard.core.logging import LogChannel, bind_context, configure_logging, get_logger
from jsonguard.document.parser import load_document, parse_json
from jsonguard.errors import JsonGuardError
from jsonguard.report.serialization import dump_report
from jsonguard.schema.loader import load_schema
from jsonguard.validation.validator import Validator

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="jsonguard",
        description="Validate JSON documents against a JSON schema subset",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"jsonguard {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate an instance against a schema")
    validate_parser.add_argument(
        "schema",
        type=str,
        help="Path to the schema file (.json, .yaml, .yml)",
    )
    validate_parser.add_argument(
        "instance",
        type=str,
        help="Path to the instance file (use - for stdin)",
    )
    validate_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Report format: text (default) or json",
    )
    validate_parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first violation",
    )
    validate_parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Maximum nesting depth (default: 64, or JSONGUARD_MAX_DEPTH env var)",
    )
    _add_logging_arguments(validate_parser)

    # Check-schema command
    check_parser = subparsers.add_parser("check-schema", help="Check that a schema compiles")
    check_parser.add_argument(
        "schema",
        type=str,
        help="Path to the schema file (.json, .yaml, .yml)",
    )
    _add_logging_arguments(check_parser)

    return parser


def _add_logging_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["silent", "info", "verbose", "debug"],
        default=None,
        help="Log verbosity level (default: silent, or JSONGUARD_LOG_LEVEL env var)",
    )
    parser.add_argument(
        "--log-channel",
        type=str,
        default=None,
        help="Comma-separated log channels to show (compile,validate,load,system). Default: all",
    )


def main(argv: list[str] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_VALID

    _configure_logging(args)

    if args.command == "validate":
        return run_validate(args)
    if args.command == "check-schema":
        return run_check_schema(args)

    return EXIT_VALID


def _configure_logging(args: argparse.Namespace) -> None:
    channels = None
    if args.log_channel:
        channels = [ch.strip() for ch in args.log_channel.split(",")]
    configure_logging(level=args.log_level, channels=channels, force=True)


def run_validate(args: argparse.Namespace) -> int:
    """Run the validate command."""
    log = get_logger(LogChannel.SYSTEM)
    bind_context(schema=args.schema)

    try:
        settings = ValidatorSettings.from_env(
            max_depth=args.max_depth,
            mode=ValidationMode.FAIL_FAST if args.fail_fast else None,
        )
        schema = load_schema(args.schema)
        instance = _read_instance(args.instance)
    except (OSError, ValueError) as e:
        # JsonGuardError is a ValueError
        log.error("validate_failed", error=str(e), error_type=type(e).__name__)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR

    result = Validator.from_settings(settings).validate(instance, schema)

    print(dump_report(result, args.format))

    return EXIT_VALID if result.valid else EXIT_INVALID


def run_check_schema(args: argparse.Namespace) -> int:
    """Run the check-schema command."""
    log = get_logger(LogChannel.SYSTEM)
    try:
        load_schema(args.schema)
    except (OSError, JsonGuardError) as e:
        log.error("schema_check_failed", error=str(e), error_type=type(e).__name__)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_ERROR

    print(f"ok: {args.schema}")
    return EXIT_VALID


def _read_instance(source: str):
    """Read the instance document from a file or stdin."""
    if source == "-":
        return parse_json(sys.stdin.read())
    return load_document(source)


if __name__ == "__main__":
    sys.exit(main())
