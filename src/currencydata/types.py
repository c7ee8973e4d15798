"""Data model for currency table generation.

All types are immutable. Mappings handed between stages are read-only
views whose keys are in sorted order; consumers must still sort explicitly
when output order matters.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TypeAlias, TypeVar

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "CurrencyCode",
    "LocaleCode",
    "LocaleParentMap",
    "ParentLocalePair",
    # Registry
    "RegistryEntry",
    "RegistryDocument",
    # Reconciled data
    "CurrencyRecord",
    "CurrencyCatalog",
    "CurrencyTables",
    # Raw sources
    "CLDRData",
    "RawSources",
    # Helpers
    "frozen_mapping",
]

# ============================================================================
# TYPE ALIASES (PEP 695)
# ============================================================================

CurrencyCode: TypeAlias = str
"""ISO 4217 alphabetic currency code (e.g., 'USD', 'EUR')."""

LocaleCode: TypeAlias = str
"""BCP-47 locale identifier (e.g., 'en', 'en-150', 'zh-Hant-MO')."""

ParentLocalePair: TypeAlias = tuple[LocaleCode, LocaleCode]
"""A (child, parent) pair from the CLDR parent-locale table."""

LocaleParentMap: TypeAlias = Mapping[LocaleCode, LocaleCode]
"""Child locale to parent locale. Never contains 'root' as a value."""


K = TypeVar("K")
V = TypeVar("V")


def frozen_mapping(items: Mapping[K, V]) -> Mapping[K, V]:
    """Return a read-only copy of ``items`` with keys in sorted order."""
    return MappingProxyType({key: items[key] for key in sorted(items)})  # type: ignore[type-var]


# ============================================================================
# REGISTRY
# ============================================================================


@dataclass(frozen=True, slots=True)
class RegistryEntry:
    """One raw row (CcyNtry) of the ISO 4217 registry.

    Attributes:
        code: Alphabetic code (Ccy); empty for countries without a currency.
        numeric_code: Numeric code (CcyNbr), verbatim.
        digits: Minor-unit digits (CcyMnrUnts), verbatim; may be "N.A.".
        country: Country name (CtryNm).
        name: Currency name (CcyNm).
        is_fund: True for investment-fund pseudo-currencies.
    """

    code: str
    numeric_code: str = ""
    digits: str = ""
    country: str = ""
    name: str = ""
    is_fund: bool = False


@dataclass(frozen=True, slots=True)
class RegistryDocument:
    """Parsed ISO 4217 registry.

    Attributes:
        published: Publication date of the list (Pblshd), empty if unknown.
        entries: Rows in document order.
    """

    published: str
    entries: tuple[RegistryEntry, ...]


# ============================================================================
# RECONCILED DATA
# ============================================================================


@dataclass(frozen=True, slots=True)
class CurrencyRecord:
    """Reconciled currency metadata.

    Attributes:
        code: ISO 4217 alphabetic code, the unique key.
        numeric_code: ISO 4217 numeric code as a digit string ("008").
        digits: Minor-unit digit count (0-4 in practice).
    """

    code: CurrencyCode
    numeric_code: str
    digits: int


@dataclass(frozen=True, slots=True)
class CurrencyCatalog:
    """Ordered currency codes paired with their records.

    Attributes:
        priority_codes: The fixed priority group, in its defined order.
        other_codes: All remaining codes, in code-point order.
        records: Code to CurrencyRecord for every code in the catalog.
    """

    priority_codes: tuple[CurrencyCode, ...]
    other_codes: tuple[CurrencyCode, ...]
    records: Mapping[CurrencyCode, CurrencyRecord]

    @property
    def codes(self) -> tuple[CurrencyCode, ...]:
        """All codes: priority group first, then the rest."""
        return self.priority_codes + self.other_codes

    def __len__(self) -> int:
        return len(self.priority_codes) + len(self.other_codes)


@dataclass(frozen=True, slots=True)
class CurrencyTables:
    """Final pipeline output handed to the emitter.

    Attributes:
        catalog: Ordered currency catalog.
        parent_locales: Resolved child to parent locale mapping.
        cldr_version: Version label of the CLDR corpus used.
        registry_published: Publication date of the ISO 4217 list.
    """

    catalog: CurrencyCatalog
    parent_locales: LocaleParentMap
    cldr_version: str
    registry_published: str = ""


# ============================================================================
# RAW SOURCES
# ============================================================================


@dataclass(frozen=True, slots=True)
class CLDRData:
    """CLDR input needed by the pipeline.

    Attributes:
        version: CLDR version label (e.g., '46.0.0').
        fractions: Currency code to raw minor-unit digits string.
        parent_locales: Raw (child, parent) pairs, sorted by child.
    """

    version: str
    fractions: Mapping[CurrencyCode, str]
    parent_locales: tuple[ParentLocalePair, ...]


@dataclass(frozen=True, slots=True)
class RawSources:
    """Fully retrieved input for one pipeline run.

    Attributes:
        registry_xml: ISO 4217 list one, as downloaded.
        cldr: CLDR fractions, parent locales and version.
    """

    registry_xml: bytes
    cldr: CLDRData
