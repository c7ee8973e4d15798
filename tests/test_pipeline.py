"""End-to-end pipeline tests against the fixture sources.

Exercises build_tables() on already retrieved input and generate() with
local sources, including the staging directory lifecycle and the
guarantee that failed runs write nothing.
"""

from __future__ import annotations

import errno
import json
import tempfile
from pathlib import Path

import pytest

from currencydata.config import GeneratorConfig, OutputFormat, SourceKind
from currencydata.constants import PRIORITY_CURRENCIES
from currencydata.errors import MissingPriorityCurrencyError, SourceUnavailableError
from currencydata.pipeline import build_tables, collect_sources, generate, write_output
from currencydata.types import CurrencyRecord, RawSources

EXPECTED_OTHER_CODES = ("AFN", "ALL", "BOB", "KWD", "RSD", "UYW")


def _directory_config(
    output: Path, iso_file: Path, cldr_dir: Path, **kwargs: object
) -> GeneratorConfig:
    return GeneratorConfig(
        output=output,
        source=SourceKind.DIRECTORY,
        cldr_dir=cldr_dir,
        iso_file=iso_file,
        **kwargs,  # type: ignore[arg-type]
    )


class TestBuildTables:
    """Test build_tables() on the fixture sources."""

    def test_catalog_order(self, raw_sources: RawSources) -> None:
        """G10 first, then the remaining qualifying codes sorted."""
        tables = build_tables(raw_sources)
        assert tables.catalog.priority_codes == PRIORITY_CURRENCIES
        assert tables.catalog.other_codes == EXPECTED_OTHER_CODES

    def test_cldr_digits_override_iso(self, raw_sources: RawSources) -> None:
        """ALL and RSD take CLDR's zero digits; others keep ISO's."""
        records = build_tables(raw_sources).catalog.records
        assert records["ALL"] == CurrencyRecord("ALL", "008", 0)
        assert records["RSD"] == CurrencyRecord("RSD", "941", 0)
        assert records["JPY"].digits == 0
        assert records["KWD"].digits == 3
        assert records["UYW"].digits == 4
        assert records["USD"] == CurrencyRecord("USD", "840", 2)

    def test_cldr_only_codes_absent(self, raw_sources: RawSources) -> None:
        """Codes known only to CLDR never enter the catalog."""
        records = build_tables(raw_sources).catalog.records
        assert "ADP" not in records
        assert "DEFAULT" not in records

    def test_parent_locales(self, raw_sources: RawSources) -> None:
        """The parent map is resolved from the CLDR fixture."""
        parents = build_tables(raw_sources).parent_locales
        assert parents["az-Arab"] == "en"
        assert parents["en-150"] == "en-001"
        assert "ff-Adlm" not in parents
        assert "en-Dsrt" not in parents
        assert len(parents) == 9

    def test_metadata(self, raw_sources: RawSources) -> None:
        """Version and publication date are carried through."""
        tables = build_tables(raw_sources)
        assert tables.cldr_version == "46.0.0"
        assert tables.registry_published == "2024-06-25"

    def test_idempotent(self, raw_sources: RawSources) -> None:
        """Two runs on the same input give equal tables."""
        first = build_tables(raw_sources)
        second = build_tables(raw_sources)
        assert first.catalog.codes == second.catalog.codes
        assert dict(first.catalog.records) == dict(second.catalog.records)
        assert dict(first.parent_locales) == dict(second.parent_locales)

    def test_missing_priority_currency(self, raw_sources: RawSources) -> None:
        """A registry without NZD fails the integrity check."""
        xml = raw_sources.registry_xml.replace(b"<Ccy>NZD</Ccy>", b"<Ccy>NZX</Ccy>")
        broken = RawSources(registry_xml=xml, cldr=raw_sources.cldr)
        with pytest.raises(MissingPriorityCurrencyError) as exc_info:
            build_tables(broken)
        assert exc_info.value.missing_codes == ("NZD",)

    def test_malformed_registry(self, raw_sources: RawSources) -> None:
        """Unparseable registry XML is a source failure."""
        broken = RawSources(registry_xml=b"<ISO_4217>", cldr=raw_sources.cldr)
        with pytest.raises(SourceUnavailableError):
            build_tables(broken, registry_source="list-one.xml")


class TestCollectSources:
    """Test collect_sources() with local inputs."""

    def test_local_sources(self, tmp_path: Path, iso_file: Path, cldr_dir: Path) -> None:
        """Local registry and CLDR directory need no staging."""
        config = _directory_config(tmp_path / "out.py", iso_file, cldr_dir)
        raw, registry_source = collect_sources(config, tmp_path)
        assert raw.registry_xml == iso_file.read_bytes()
        assert raw.cldr.version == "46.0.0"
        assert registry_source == str(iso_file)
        assert list(tmp_path.iterdir()) == []


class TestGenerate:
    """Test generate() end to end."""

    def test_writes_python_module(self, tmp_path: Path, iso_file: Path, cldr_dir: Path) -> None:
        """A successful run writes the module and returns the tables."""
        output = tmp_path / "out" / "currency_data.py"
        tables = generate(_directory_config(output, iso_file, cldr_dir))
        source = output.read_text(encoding="utf-8")
        assert source.startswith("# Code generated by currencydata; DO NOT EDIT.\n")
        assert 'CLDR_VERSION = "46.0.0"' in source
        assert '"ALL": ("008", 0)' in source
        assert len(tables.catalog) == len(PRIORITY_CURRENCIES) + len(EXPECTED_OTHER_CODES)

    def test_writes_json(self, tmp_path: Path, iso_file: Path, cldr_dir: Path) -> None:
        """The JSON format produces a parseable document."""
        output = tmp_path / "currency_data.json"
        generate(
            _directory_config(output, iso_file, cldr_dir, output_format=OutputFormat.JSON)
        )
        document = json.loads(output.read_text(encoding="utf-8"))
        assert document["currency_codes"][:10] == list(PRIORITY_CURRENCIES)
        assert document["currencies"]["RSD"] == {"numeric_code": "941", "digits": 0}

    def test_byte_identical_reruns(self, tmp_path: Path, iso_file: Path, cldr_dir: Path) -> None:
        """Unchanged sources give byte-identical output."""
        first = tmp_path / "first.py"
        second = tmp_path / "second.py"
        generate(_directory_config(first, iso_file, cldr_dir))
        generate(_directory_config(second, iso_file, cldr_dir))
        assert first.read_bytes() == second.read_bytes()

    def test_existing_output_replaced(self, tmp_path: Path, iso_file: Path, cldr_dir: Path) -> None:
        """A previous table is overwritten."""
        output = tmp_path / "currency_data.py"
        output.write_text("stale", encoding="utf-8")
        generate(_directory_config(output, iso_file, cldr_dir))
        assert "stale" not in output.read_text(encoding="utf-8")

    def test_failed_run_writes_nothing(self, tmp_path: Path, cldr_dir: Path) -> None:
        """A source failure leaves no output file behind."""
        output = tmp_path / "currency_data.py"
        config = _directory_config(output, tmp_path / "missing.xml", cldr_dir)
        with pytest.raises(SourceUnavailableError):
            generate(config)
        assert not output.exists()

    def test_failed_run_keeps_previous_output(
        self, tmp_path: Path, cldr_dir: Path, raw_sources: RawSources
    ) -> None:
        """An integrity failure does not touch an existing table."""
        broken_iso = tmp_path / "list-one.xml"
        broken_iso.write_bytes(raw_sources.registry_xml.replace(b"<Ccy>SEK</Ccy>", b""))
        output = tmp_path / "currency_data.py"
        output.write_text("previous", encoding="utf-8")
        with pytest.raises(MissingPriorityCurrencyError):
            generate(_directory_config(output, broken_iso, cldr_dir))
        assert output.read_text(encoding="utf-8") == "previous"

    @pytest.mark.parametrize("fail", [False, True])
    def test_staging_directory_removed(
        self,
        tmp_path: Path,
        iso_file: Path,
        cldr_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
        fail: bool,
    ) -> None:
        """The staging directory is removed on success and failure."""
        staging_root = tmp_path / "staging"
        staging_root.mkdir()
        monkeypatch.setattr(tempfile, "tempdir", str(staging_root))
        iso = tmp_path / "missing.xml" if fail else iso_file
        config = _directory_config(tmp_path / "out.py", iso, cldr_dir)
        if fail:
            with pytest.raises(SourceUnavailableError):
                generate(config)
        else:
            generate(config)
        assert list(staging_root.iterdir()) == []

    def test_staging_creation_failure(
        self, tmp_path: Path, iso_file: Path, cldr_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A staging directory that cannot be created makes the run source-unavailable."""
        monkeypatch.setattr(tempfile, "tempdir", str(tmp_path / "absent"))
        output = tmp_path / "out.py"
        with pytest.raises(SourceUnavailableError, match="staging directory"):
            generate(_directory_config(output, iso_file, cldr_dir))
        assert not output.exists()

    def test_interrupted_write_keeps_previous_output(
        self, tmp_path: Path, iso_file: Path, cldr_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A write that fails halfway leaves the previous table intact."""
        output = tmp_path / "currency_data.py"
        output.write_text("previous", encoding="utf-8")

        def short_write(self: Path, data: str, *args: object, **kwargs: object) -> int:
            with self.open("w", encoding="utf-8") as handle:
                handle.write(data[:16])
            raise OSError(errno.ENOSPC, "No space left on device")

        monkeypatch.setattr(Path, "write_text", short_write)
        with pytest.raises(OSError, match="No space left"):
            generate(_directory_config(output, iso_file, cldr_dir))
        monkeypatch.undo()

        assert output.read_text(encoding="utf-8") == "previous"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["currency_data.py"]


class TestWriteOutput:
    """Test write_output()."""

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        """Missing parent directories are created."""
        target = tmp_path / "a" / "b" / "table.json"
        write_output(target, "{}\n")
        assert target.read_text(encoding="utf-8") == "{}\n"

    def test_replaces_existing_file(self, tmp_path: Path) -> None:
        """An existing file is replaced and no temporary file remains."""
        target = tmp_path / "table.json"
        target.write_text("old", encoding="utf-8")
        write_output(target, "new")
        assert target.read_text(encoding="utf-8") == "new"
        assert list(tmp_path.iterdir()) == [target]
