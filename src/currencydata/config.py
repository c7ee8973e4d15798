"""Run configuration for currency table generation.

Provides a single frozen dataclass that encapsulates every parameter of a
generation run. The CLI builds one from its arguments; library callers can
construct it directly.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from currencydata.constants import CLDR_JSON_BASE_URL, FETCH_TIMEOUT, ISO_4217_URL

__all__ = [
    "GeneratorConfig",
    "OutputFormat",
    "SourceKind",
]


class OutputFormat(StrEnum):
    """Rendering of the generated table.

    StrEnum provides automatic string conversion: str(OutputFormat.JSON) == "json"
    """

    PYTHON = "python"
    """Importable Python data module."""

    JSON = "json"
    """JSON document with sorted keys."""


class SourceKind(StrEnum):
    """Where CLDR data comes from."""

    REMOTE = "remote"
    """Download cldr-core JSON files into the staging directory."""

    BABEL = "babel"
    """CLDR data bundled with the installed Babel release."""

    DIRECTORY = "directory"
    """Local cldr-core checkout (cldr_dir)."""


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Immutable configuration for one generation run.

    All fields have defaults except where a source kind requires a path;
    ``GeneratorConfig()`` downloads everything and writes currency_data.py.

    Attributes:
        output: File the rendered table is written to (replaced if present).
        output_format: Rendering of the table.
        source: Where CLDR data comes from.
        iso_url: ISO 4217 list one download location.
        cldr_base_url: Root of the cldr-core package for remote downloads.
        timeout: Seconds allowed per download.
        iso_file: Local ISO 4217 list one. When set, nothing is downloaded
            for the registry.
        cldr_dir: Local cldr-core directory. Required for
            SourceKind.DIRECTORY, rejected otherwise.

    Example:
        >>> config = GeneratorConfig(
        ...     output=Path("data.py"),
        ...     source=SourceKind.BABEL,
        ...     iso_file=Path("list-one.xml"),
        ... )
        >>> config.output_format
        <OutputFormat.PYTHON: 'python'>
    """

    output: Path = Path("currency_data.py")
    output_format: OutputFormat = OutputFormat.PYTHON
    source: SourceKind = SourceKind.REMOTE
    iso_url: str = ISO_4217_URL
    cldr_base_url: str = CLDR_JSON_BASE_URL
    timeout: float = FETCH_TIMEOUT
    iso_file: Path | None = None
    cldr_dir: Path | None = None

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If timeout is not positive, a URL is not http(s), or
                cldr_dir does not match the source kind.
        """
        if self.timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)
        for name, url in (("iso_url", self.iso_url), ("cldr_base_url", self.cldr_base_url)):
            if not url.startswith(("https://", "http://")):
                msg = f"{name} must be an http(s) URL, got: {url!r}"
                raise ValueError(msg)
        if self.source == SourceKind.DIRECTORY and self.cldr_dir is None:
            msg = "cldr_dir is required when source is 'directory'"
            raise ValueError(msg)
        if self.source != SourceKind.DIRECTORY and self.cldr_dir is not None:
            msg = f"cldr_dir is only used when source is 'directory', not {self.source!s}"
            raise ValueError(msg)
