#!/usr/bin/env python3
"""
templatemethod CLI — Run registered variants of the template.

Usage:
    templatemethod run                     # default variant (hello_world)
    templatemethod run goodbye --times 2
    templatemethod list
    templatemethod --log-level DEBUG --json-logs run

Only step output goes to stdout; logs and traces go to stderr.
"""

import argparse
import sys

import structlog

from templatemethod.config import get_settings
from templatemethod.errors import VariantNotFoundError
from templatemethod.logging import setup_logging
from templatemethod.registry import get_registry
from templatemethod.version import VERSION

logger = structlog.get_logger(__name__)


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def run_variant(name: str, times: int = 1) -> None:
    """Build the named variant and run its skeleton `times` times."""
    process = get_registry().create(name)
    logger.info("variant_run_started", variant=name, times=times)
    for _ in range(times):
        process.process_do_something()
    logger.info("variant_run_completed", variant=name, times=times)


def list_variants() -> None:
    """Print one line per registered variant."""
    for info in get_registry().list_all():
        print("  ".join([info.name, info.class_name, info.description]).rstrip())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="templatemethod", description="Template Method demo CLI"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Minimum log level",
    )
    parser.add_argument(
        "--json-logs", action="store_true", default=None, help="Emit JSON logs"
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        default=None,
        help="Export OpenTelemetry spans to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # run command
    run_parser = subparsers.add_parser("run", help="Run a variant")
    run_parser.add_argument(
        "variant", nargs="?", help="Registered variant name (default from settings)"
    )
    run_parser.add_argument(
        "--times",
        type=_positive_int,
        default=1,
        help="How many times to run the skeleton",
    )

    # list command
    subparsers.add_parser("list", help="List registered variants")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()

    if args.log_level:
        settings = settings.model_copy(update={"log_level": args.log_level})
    if args.json_logs is not None:
        settings = settings.model_copy(update={"json_logs": args.json_logs})
    if args.trace is not None:
        settings = settings.model_copy(update={"tracing_enabled": args.trace})

    setup_logging(level=settings.log_level_number, json_output=settings.json_logs)

    if settings.tracing_enabled:
        from templatemethod.observability import setup_tracing

        setup_tracing()

    if args.command == "list":
        list_variants()
        return 0

    variant = args.variant or settings.default_variant
    try:
        run_variant(variant, args.times)
    except VariantNotFoundError as exc:
        logger.error("variant_not_found", **exc.to_dict())
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
