"""currencydata - Currency and locale metadata table generator.

Reconciles the ISO 4217 currency registry with Unicode CLDR data into one
canonical, deterministically ordered table for currency formatting:
numeric codes and usage-adjusted minor-unit digits per currency, plus the
parent-locale hierarchy.

Public API:
    generate - Run the full pipeline and write the table
    build_tables - Reconcile already retrieved sources
    GeneratorConfig - Run configuration
    render - Render tables as a Python module or JSON

Pipeline stages:
    currencydata.registry - ISO 4217 extraction
    currencydata.overrides - CLDR digit overrides
    currencydata.locales - Parent-locale resolution
    currencydata.catalog - Ordered catalog assembly

Exceptions:
    CurrencyDataError - Base exception class
    SourceUnavailableError - Input could not be retrieved or parsed
    DataIntegrityError - Assembled data violates an invariant
"""

from .config import GeneratorConfig, OutputFormat, SourceKind
from .emitter import render
from .errors import (
    CurrencyDataError,
    DataIntegrityError,
    MissingPriorityCurrencyError,
    SourceUnavailableError,
)
from .pipeline import build_tables, generate
from .types import CurrencyCatalog, CurrencyRecord, CurrencyTables

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("currencydata")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CurrencyCatalog",
    "CurrencyDataError",
    "CurrencyRecord",
    "CurrencyTables",
    "DataIntegrityError",
    "GeneratorConfig",
    "MissingPriorityCurrencyError",
    "OutputFormat",
    "SourceKind",
    "SourceUnavailableError",
    "__version__",
    "build_tables",
    "generate",
    "render",
]
