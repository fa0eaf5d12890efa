"""CLI entry point for sheetlocales.

Usage:
    python -m sheetlocales generate [spreadsheet_id_or_url] [output_dir] [--api-key KEY]
    python -m sheetlocales languages [--catalog PATH]

Values not given on the command line are read from SHEETLOCALES_*
environment variables (see sheetlocales.config).
"""

from __future__ import annotations

import argparse
import asyncio
import inspect
import re
import sys
from pathlib import Path

import pydantic
from loguru import logger

from sheetlocales.client import generate_files_from_spreadsheet
from sheetlocales.config import Settings, get_settings
from sheetlocales.exceptions import CatalogError
from sheetlocales.languages import DEFAULT_CATALOG, LanguageCatalog
from sheetlocales.logging import configure_logging
from sheetlocales.writer import OutputFormat


def parse_spreadsheet_id(id_or_url: str) -> str:
    """Extract spreadsheet ID from a URL or return as-is if already an ID."""
    # https://docs.google.com/spreadsheets/d/SPREADSHEET_ID/edit...
    url_pattern = r"docs\.google\.com/spreadsheets/d/([a-zA-Z0-9_-]+)"
    match = re.search(url_pattern, id_or_url)
    if match:
        return match.group(1)
    return id_or_url


def _load_catalog(catalog_path: Path | None) -> LanguageCatalog:
    if catalog_path is None:
        return DEFAULT_CATALOG
    return LanguageCatalog.from_file(catalog_path)


async def cmd_generate(args: argparse.Namespace, settings: Settings) -> int:
    """Generate translation files from a spreadsheet."""
    spreadsheet = args.spreadsheet or settings.spreadsheet_id
    spreadsheet_id = parse_spreadsheet_id(spreadsheet) if spreadsheet else ""
    output_dir = Path(args.output) if args.output else settings.output_dir
    output_format = OutputFormat(args.format) if args.format else settings.output_format
    beautify = args.beautify if args.beautify is not None else settings.beautify
    timeout = args.timeout if args.timeout is not None else settings.timeout

    try:
        catalog = _load_catalog(args.catalog or settings.catalog_path)
    except CatalogError as e:
        logger.error("{}", e)
        return 1

    result = await generate_files_from_spreadsheet(
        spreadsheet_id,
        args.api_key or settings.api_key,
        output_dir,
        output_format,
        beautify,
        catalog=catalog,
        timeout=timeout,
    )
    for path in result.written:
        print(path)
    # Failures are reported through the log; the run itself always completes.
    return 0


def cmd_languages(args: argparse.Namespace, settings: Settings) -> int:
    """Print the language catalog."""
    try:
        catalog = _load_catalog(args.catalog or settings.catalog_path)
    except CatalogError as e:
        logger.error("{}", e)
        return 1

    for entry in catalog:
        print(f"{entry.code}\t{'; '.join(entry.names)}")
    return 0


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be a non-negative integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sheetlocales",
        description="Generate i18n translation files from Google Sheets",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Minimum log level (default: INFO)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=None,
        help="Write logs as JSON lines",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # generate subcommand
    generate_parser = subparsers.add_parser(
        "generate",
        help="Write one translation file per language sheet",
    )
    generate_parser.add_argument(
        "spreadsheet",
        nargs="?",
        default=None,
        help="Spreadsheet ID or full Google Sheets URL",
    )
    generate_parser.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Output directory (default: ./locales)",
    )
    generate_parser.add_argument(
        "--api-key",
        default=None,
        help="Google Cloud API key (default: $SHEETLOCALES_API_KEY)",
    )
    generate_parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=None,
        help="Format of generated files (default: json)",
    )
    generate_parser.add_argument(
        "--beautify",
        type=_non_negative_int,
        default=None,
        help="Number of spaces used for indentation (default: 4)",
    )
    generate_parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds (default: 60)",
    )
    generate_parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="JSON file with a custom language catalog",
    )
    generate_parser.set_defaults(func=cmd_generate)

    # languages subcommand
    languages_parser = subparsers.add_parser(
        "languages",
        help="List the language names and codes sheets are matched against",
    )
    languages_parser.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="JSON file with a custom language catalog",
    )
    languages_parser.set_defaults(func=cmd_languages)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except pydantic.ValidationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    configure_logging(
        json_logs=args.json_logs if args.json_logs is not None else settings.json_logs,
        log_level=args.log_level or settings.log_level,
    )

    if inspect.iscoroutinefunction(args.func):
        result: int = asyncio.run(args.func(args, settings))
        return result
    return int(args.func(args, settings))


if __name__ == "__main__":
    sys.exit(main())
