#!/usr/bin/env python3
"""
MacPack Launcher CLI - Run .mpb bundles through the macpack runtime
"""

import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from macpack_launcher import __version__
from macpack_launcher.application import Launcher
from macpack_launcher.errors import BundleManifestError
from macpack_launcher.infrastructure.bundle import read_manifest
from macpack_launcher.infrastructure.config import Settings, get_settings
from macpack_launcher.infrastructure.logging import configure_logging, get_logger
from macpack_launcher.interfaces.cli.formatter import ResultFormatter

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def parse_args(settings: Settings, argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments, taking defaults from settings"""
    parser = argparse.ArgumentParser(
        prog="macpack-launch",
        description="Run .mpb bundles with the macpack runtime and show their output",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )
    parser.add_argument(
        "--log-format",
        choices=["text", "json"],
        default=settings.log_format,
        help=f"Log output format (default: {settings.log_format})",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    run_parser = subparsers.add_parser("run", help="Run a bundle and print its output")
    run_parser.add_argument(
        "bundle",
        nargs="?",
        help="Path to bundle (.mpb)",
    )
    run_parser.add_argument(
        "--format",
        choices=["pretty", "json"],
        default="pretty",
        help="Output format (default: pretty)",
    )
    run_parser.add_argument(
        "--show-exit-status",
        action="store_true",
        help="Print the tool's exit status to stderr after its output",
    )

    info_parser = subparsers.add_parser("info", help="Show a bundle's app.json metadata")
    info_parser.add_argument("bundle", help="Path to bundle (.mpb)")
    info_parser.add_argument(
        "--format",
        choices=["pretty", "json"],
        default="pretty",
        help="Output format (default: pretty)",
    )

    return parser.parse_args(argv)


def describe_settings_error(error: ValidationError) -> str:
    """One line naming the first offending MACPACK_* variable."""
    first = error.errors()[0]
    field = ".".join(str(part) for part in first["loc"])
    return f"invalid MACPACK_{field.upper()}: {first['msg']}"


def run_command(args: argparse.Namespace) -> int:
    if args.bundle is None:
        print("Error: no bundle selected", file=sys.stderr)
        return EXIT_USAGE

    formatter = ResultFormatter(format=args.format)
    result = Launcher().run(args.bundle)

    if result.is_failure:
        stream = sys.stdout if args.format == "json" else sys.stderr
        stream.write(formatter.format_result(result))
        return EXIT_FAILURE

    sys.stdout.write(formatter.format_result(result))
    sys.stdout.flush()
    if args.show_exit_status:
        sys.stderr.write(formatter.format_exit_status(result))
    return EXIT_OK


def info_command(args: argparse.Namespace) -> int:
    formatter = ResultFormatter(format=args.format)
    try:
        manifest = read_manifest(args.bundle)
    except BundleManifestError as e:
        get_logger(bundle_path=args.bundle).debug("Manifest unavailable", **e.to_dict())
        stream = sys.stdout if args.format == "json" else sys.stderr
        stream.write(formatter.format_manifest_error(e))
        return EXIT_FAILURE

    sys.stdout.write(formatter.format_manifest(manifest, args.bundle))
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI function"""
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: {describe_settings_error(e)}", file=sys.stderr)
        return EXIT_USAGE

    args = parse_args(settings, argv)
    configure_logging(log_level=args.log_level, log_format=args.log_format)

    if args.command == "info":
        return info_command(args)
    return run_command(args)


def entry_point():
    sys.exit(main())


if __name__ == "__main__":
    entry_point()
