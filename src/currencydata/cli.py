"""Command-line entry point.

Usage:
    currencydata [-o OUTPUT] [--format {python,json}]
                 [--cldr-source {remote,babel,directory}] [--cldr-dir DIR]
                 [--iso-file FILE] [--iso-url URL] [--cldr-url URL]
                 [--timeout SECONDS] [-v | -q]

Exit codes:
    0: Table generated
    1: Data integrity failure (e.g., priority currency missing)
    2: Source unavailable (download, read or parse failure)
    3: Configuration error (invalid arguments, output not writable)

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from currencydata.config import GeneratorConfig, OutputFormat, SourceKind
from currencydata.constants import CLDR_JSON_BASE_URL, FETCH_TIMEOUT, ISO_4217_URL
from currencydata.errors import DataIntegrityError, SourceUnavailableError
from currencydata.pipeline import generate

__all__ = [
    "EXIT_CONFIG_ERROR",
    "EXIT_DATA_INTEGRITY",
    "EXIT_OK",
    "EXIT_SOURCE_UNAVAILABLE",
    "build_config",
    "main",
]

logger = logging.getLogger("currencydata")

EXIT_OK = 0
EXIT_DATA_INTEGRITY = 1
EXIT_SOURCE_UNAVAILABLE = 2
EXIT_CONFIG_ERROR = 3

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="currencydata",
        description=(
            "Generate the currency and parent-locale table from ISO 4217 and Unicode CLDR."
        ),
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=Path("currency_data.py"),
        help="File to write (replaced if present). Default: %(default)s",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=[str(f) for f in OutputFormat],
        default=str(OutputFormat.PYTHON),
        help="Output format. Default: %(default)s",
    )
    parser.add_argument(
        "--cldr-source",
        choices=[str(s) for s in SourceKind],
        default=str(SourceKind.REMOTE),
        help="Where CLDR data comes from. Default: %(default)s",
    )
    parser.add_argument(
        "--cldr-dir",
        type=Path,
        help="Local cldr-core directory (with --cldr-source directory).",
    )
    parser.add_argument(
        "--iso-file",
        type=Path,
        help="Local ISO 4217 list one XML instead of downloading it.",
    )
    parser.add_argument("--iso-url", default=ISO_4217_URL, help="ISO 4217 list one URL.")
    parser.add_argument("--cldr-url", default=CLDR_JSON_BASE_URL, help="cldr-core base URL.")
    parser.add_argument(
        "--timeout",
        type=float,
        default=FETCH_TIMEOUT,
        help="Seconds allowed per download. Default: %(default)s",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log debug details.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Log warnings only.")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build a GeneratorConfig from parsed arguments.

    Raises:
        ValueError: If the arguments do not form a valid configuration.
    """
    return GeneratorConfig(
        output=args.output,
        output_format=OutputFormat(args.output_format),
        source=SourceKind(args.cldr_source),
        iso_url=args.iso_url,
        cldr_base_url=args.cldr_url,
        timeout=args.timeout,
        iso_file=args.iso_file,
        cldr_dir=args.cldr_dir,
    )


def _configure_logging(args: argparse.Namespace) -> None:
    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format=_LOG_FORMAT, stream=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Run the generator and return a process exit code."""
    args = _parse_args(argv)
    _configure_logging(args)

    try:
        config = build_config(args)
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)  # noqa: TRY400
        return EXIT_CONFIG_ERROR

    try:
        generate(config)
    except SourceUnavailableError as e:
        logger.error("Source unavailable: %s", e)  # noqa: TRY400
        return EXIT_SOURCE_UNAVAILABLE
    except DataIntegrityError as e:
        logger.error("Data integrity failure: %s", e)  # noqa: TRY400
        return EXIT_DATA_INTEGRITY
    except OSError as e:
        logger.error("I/O error (output %s): %s", config.output, e)  # noqa: TRY400
        return EXIT_CONFIG_ERROR
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
