"""Pipeline driver: sources -> reconciliation -> emission.

Stages run strictly in sequence; each consumes the complete output of the
previous one and returns a new read-only structure. The first failure
aborts the run. Downloaded assets live in a temporary staging directory
that is removed on success and failure alike.

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from currencydata.catalog import assemble_catalog
from currencydata.config import GeneratorConfig, SourceKind
from currencydata.emitter import render
from currencydata.errors import SourceUnavailableError
from currencydata.locales import resolve_parent_locales
from currencydata.overrides import merge_digit_overrides
from currencydata.registry import extract_currencies, parse_registry
from currencydata.sources import (
    load_babel_cldr,
    load_cldr_directory,
    read_source_file,
    stage_cldr,
    stage_iso_registry,
)
from currencydata.types import CLDRData, CurrencyTables, RawSources

__all__ = [
    "build_tables",
    "collect_sources",
    "generate",
    "write_output",
]

logger = logging.getLogger(__name__)


def build_tables(raw: RawSources, *, registry_source: str = "") -> CurrencyTables:
    """Reconcile raw sources into the final tables.

    Runs registry extraction, digit overrides, parent-locale resolution
    and catalog assembly, in that order.

    Args:
        raw: Fully retrieved input.
        registry_source: URL or path of the registry, for error messages.

    Returns:
        CurrencyTables ready for emission.

    Raises:
        SourceUnavailableError: If the registry XML cannot be parsed.
        MissingPriorityCurrencyError: If a priority currency is missing.
    """
    document = parse_registry(raw.registry_xml, source=registry_source)
    records = extract_currencies(document.entries)
    records = merge_digit_overrides(records, raw.cldr.fractions)
    parent_locales = resolve_parent_locales(raw.cldr.parent_locales)
    catalog = assemble_catalog(records)
    return CurrencyTables(
        catalog=catalog,
        parent_locales=parent_locales,
        cldr_version=raw.cldr.version,
        registry_published=document.published,
    )


def _collect_cldr(config: GeneratorConfig, staging_dir: Path) -> CLDRData:
    match config.source:
        case SourceKind.BABEL:
            return load_babel_cldr()
        case SourceKind.DIRECTORY:
            # __post_init__ guarantees cldr_dir for this source kind
            assert config.cldr_dir is not None  # noqa: S101
            return load_cldr_directory(config.cldr_dir)
        case _:
            cldr_dir = stage_cldr(
                staging_dir, base_url=config.cldr_base_url, timeout=config.timeout
            )
            return load_cldr_directory(cldr_dir)


def collect_sources(config: GeneratorConfig, staging_dir: Path) -> tuple[RawSources, str]:
    """Obtain all raw input for a run.

    Args:
        config: Run configuration.
        staging_dir: Existing directory for downloaded assets.

    Returns:
        Tuple of (raw sources, registry location for error messages).

    Raises:
        SourceUnavailableError: If any input cannot be retrieved.
    """
    logger.info("Fetching CLDR data...")
    cldr = _collect_cldr(config, staging_dir)

    logger.info("Fetching ISO data...")
    if config.iso_file is not None:
        iso_file = config.iso_file
        registry_source = str(iso_file)
    else:
        iso_file = stage_iso_registry(staging_dir, url=config.iso_url, timeout=config.timeout)
        registry_source = config.iso_url
    registry_xml = read_source_file(iso_file)

    return RawSources(registry_xml=registry_xml, cldr=cldr), registry_source


def _open_staging() -> tempfile.TemporaryDirectory[str]:
    try:
        return tempfile.TemporaryDirectory(prefix="currencydata-")
    except OSError as e:
        msg = f"Cannot create staging directory: {e.strerror or e}"
        raise SourceUnavailableError(msg, source=tempfile.gettempdir()) from e


def write_output(path: Path, content: str) -> None:
    """Atomically replace ``path`` with ``content``.

    The text goes to a sibling ``.tmp`` file, which is then renamed over
    the target. A failed write leaves any previous file untouched and
    removes the temporary file.

    Raises:
        OSError: If the directory or file cannot be written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_name(path.name + ".tmp")
    try:
        tmp_path.write_text(content, encoding="utf-8")
        os.replace(tmp_path, path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise


def generate(config: GeneratorConfig) -> CurrencyTables:
    """Run the whole pipeline and write the rendered table.

    The output file is only replaced after every stage succeeded, and the
    replacement is atomic, so a failed run never leaves a partial table
    behind.

    Args:
        config: Run configuration.

    Returns:
        The tables that were written.

    Raises:
        SourceUnavailableError: If any input cannot be retrieved or parsed,
            or the staging directory cannot be created.
        DataIntegrityError: If the assembled data violates an invariant.
        OSError: If the output file cannot be written.
    """
    with _open_staging() as staging:
        raw, registry_source = collect_sources(config, Path(staging))

        logger.info("Processing...")
        tables = build_tables(raw, registry_source=registry_source)

    write_output(config.output, render(tables, config.output_format))
    logger.info(
        "Wrote %d currencies and %d parent locales to %s",
        len(tables.catalog),
        len(tables.parent_locales),
        config.output,
    )
    logger.info("Done.")
    return tables
