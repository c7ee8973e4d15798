"""Tests for the command-line entry point and its exit codes."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from currencydata import cli
from currencydata.cli import (
    EXIT_CONFIG_ERROR,
    EXIT_DATA_INTEGRITY,
    EXIT_OK,
    EXIT_SOURCE_UNAVAILABLE,
    build_config,
    main,
)
from currencydata.config import OutputFormat, SourceKind


def _local_args(output: Path, iso_file: Path, cldr_dir: Path) -> list[str]:
    return [
        "-o", str(output),
        "--cldr-source", "directory",
        "--cldr-dir", str(cldr_dir),
        "--iso-file", str(iso_file),
        "-q",
    ]


class TestBuildConfig:
    """Test argument to configuration mapping."""

    def test_defaults(self) -> None:
        """No arguments give the default configuration."""
        config = build_config(cli._parse_args([]))
        assert config.output == Path("currency_data.py")
        assert config.output_format is OutputFormat.PYTHON
        assert config.source is SourceKind.REMOTE

    def test_all_options(self, tmp_path: Path) -> None:
        """Every option reaches the configuration."""
        args = cli._parse_args(
            [
                "-o", str(tmp_path / "t.json"),
                "--format", "json",
                "--cldr-source", "babel",
                "--iso-file", str(tmp_path / "list-one.xml"),
                "--iso-url", "https://mirror.example/list-one.xml",
                "--cldr-url", "https://mirror.example/cldr-core",
                "--timeout", "30",
            ]
        )
        config = build_config(args)
        assert config.output == tmp_path / "t.json"
        assert config.output_format is OutputFormat.JSON
        assert config.source is SourceKind.BABEL
        assert config.iso_file == tmp_path / "list-one.xml"
        assert config.iso_url == "https://mirror.example/list-one.xml"
        assert config.cldr_base_url == "https://mirror.example/cldr-core"
        assert config.timeout == 30.0

    def test_unknown_format_rejected_by_parser(self) -> None:
        """argparse rejects formats outside the choices."""
        with pytest.raises(SystemExit):
            cli._parse_args(["--format", "yaml"])

    def test_verbose_and_quiet_exclusive(self) -> None:
        """-v and -q cannot be combined."""
        with pytest.raises(SystemExit):
            cli._parse_args(["-v", "-q"])


class TestMain:
    """Test main() exit codes."""

    def test_success(self, tmp_path: Path, iso_file: Path, cldr_dir: Path) -> None:
        """A complete local run exits 0 and writes the table."""
        output = tmp_path / "currency_data.py"
        assert main(_local_args(output, iso_file, cldr_dir)) == EXIT_OK
        assert output.is_file()

    def test_missing_source_file(self, tmp_path: Path, cldr_dir: Path) -> None:
        """An unreadable registry exits 2."""
        args = _local_args(tmp_path / "out.py", tmp_path / "missing.xml", cldr_dir)
        assert main(args) == EXIT_SOURCE_UNAVAILABLE

    def test_integrity_failure(self, tmp_path: Path, iso_file: Path, cldr_dir: Path) -> None:
        """A registry lacking a priority currency exits 1."""
        broken = tmp_path / "list-one.xml"
        broken.write_bytes(iso_file.read_bytes().replace(b"<Ccy>CAD</Ccy>", b"<Ccy>CAX</Ccy>"))
        output = tmp_path / "out.py"
        assert main(_local_args(output, broken, cldr_dir)) == EXIT_DATA_INTEGRITY
        assert not output.exists()

    def test_invalid_configuration(self, tmp_path: Path) -> None:
        """A directory source without --cldr-dir exits 3."""
        assert main(["-o", str(tmp_path / "o.py"), "--cldr-source", "directory"]) == (
            EXIT_CONFIG_ERROR
        )

    def test_invalid_timeout(self) -> None:
        """A non-positive timeout exits 3."""
        assert main(["--timeout", "0"]) == EXIT_CONFIG_ERROR

    def test_unwritable_output(self, tmp_path: Path, iso_file: Path, cldr_dir: Path) -> None:
        """An output path that cannot be written exits 3."""
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        output = blocker / "currency_data.py"
        assert main(_local_args(output, iso_file, cldr_dir)) == EXIT_CONFIG_ERROR

    def test_error_logged(
        self, tmp_path: Path, cldr_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Failures are reported through logging."""
        args = _local_args(tmp_path / "out.py", tmp_path / "missing.xml", cldr_dir)
        with caplog.at_level(logging.ERROR, logger="currencydata"):
            main(args)
        assert any("Source unavailable" in r.getMessage() for r in caplog.records)

    def test_staging_failure_is_source_unavailable(
        self, tmp_path: Path, iso_file: Path, cldr_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A staging directory that cannot be created exits 2, not 3."""
        monkeypatch.setattr("tempfile.tempdir", str(tmp_path / "absent"))
        args = _local_args(tmp_path / "out.py", iso_file, cldr_dir)
        assert main(args) == EXIT_SOURCE_UNAVAILABLE
