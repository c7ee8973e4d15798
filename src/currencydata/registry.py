"""ISO 4217 registry extraction.

ISO data is used for the set of currencies and their numeric codes because
CLDR is not a reliable source for either: CLDR lists inactive currencies
alongside active ones, and some active currencies have had no numeric code
in CLDR. ISO list one contains only active currencies, which matches the
needs of the table.

Document layout (list one):

    <ISO_4217 Pblshd="2024-06-25">
      <CcyTbl>
        <CcyNtry>
          <CtryNm>AFGHANISTAN</CtryNm>
          <CcyNm>Afghani</CcyNm>
          <Ccy>AFN</Ccy>
          <CcyNbr>971</CcyNbr>
          <CcyMnrUnts>2</CcyMnrUnts>
        </CcyNtry>
        ...

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Iterable, Mapping

from currencydata.constants import EXCLUDED_CURRENCY_CODES, SPECIAL_COUNTRY_PREFIX
from currencydata.digits import parse_digits
from currencydata.errors import SourceUnavailableError
from currencydata.types import (
    CurrencyCode,
    CurrencyRecord,
    RegistryDocument,
    RegistryEntry,
    frozen_mapping,
)

__all__ = [
    "extract_currencies",
    "is_excluded_entry",
    "parse_registry",
]

logger = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"true", "t", "1"})


def _child_text(element: ET.Element, tag: str) -> str:
    """Return stripped text of the first child named ``tag``, or ''."""
    child = element.find(tag)
    if child is None or child.text is None:
        return ""
    return child.text.strip()


def _parse_entry(element: ET.Element) -> RegistryEntry:
    name_element = element.find("CcyNm")
    is_fund = False
    name = ""
    if name_element is not None:
        name = (name_element.text or "").strip()
        is_fund = name_element.get("IsFund", "").strip().lower() in _TRUE_VALUES
    return RegistryEntry(
        code=_child_text(element, "Ccy"),
        numeric_code=_child_text(element, "CcyNbr"),
        digits=_child_text(element, "CcyMnrUnts"),
        country=_child_text(element, "CtryNm"),
        name=name,
        is_fund=is_fund,
    )


def parse_registry(data: bytes, *, source: str = "") -> RegistryDocument:
    """Parse ISO 4217 list one.

    Only the first CcyTbl element is read.

    Args:
        data: Raw XML document.
        source: URL or path of the document, for error messages.

    Returns:
        RegistryDocument with entries in document order.

    Raises:
        SourceUnavailableError: If the document is not well-formed XML or
            has no currency table.
    """
    try:
        root = ET.fromstring(data)  # noqa: S314 - trusted publisher, no DTDs
    except ET.ParseError as e:
        msg = f"ISO 4217 registry is not valid XML: {e}"
        raise SourceUnavailableError(msg, source=source) from e

    table = root.find("CcyTbl")
    if table is None:
        msg = f"ISO 4217 registry has no CcyTbl element (root: <{root.tag}>)"
        raise SourceUnavailableError(msg, source=source)

    entries = tuple(_parse_entry(element) for element in table.iter("CcyNtry"))
    logger.debug("Parsed %d ISO 4217 registry entries", len(entries))
    return RegistryDocument(published=root.get("Pblshd", "").strip(), entries=entries)


def is_excluded_entry(entry: RegistryEntry) -> bool:
    """Check whether a registry entry stays out of the currency table.

    Excluded are rows without a code (territories with no universal
    currency), investment-fund units, the supranational units in
    EXCLUDED_CURRENCY_CODES and special currencies such as gold, whose
    country name starts with SPECIAL_COUNTRY_PREFIX.
    """
    return (
        not entry.code
        or entry.is_fund
        or entry.code in EXCLUDED_CURRENCY_CODES
        or entry.country.startswith(SPECIAL_COUNTRY_PREFIX)
    )


def extract_currencies(
    entries: Iterable[RegistryEntry],
) -> Mapping[CurrencyCode, CurrencyRecord]:
    """Build currency records from registry entries.

    Most currencies appear once per country using them; every row yields the
    same record, so duplicates simply overwrite.

    Args:
        entries: Registry rows.

    Returns:
        Read-only mapping of code to CurrencyRecord, keys sorted.
    """
    records: dict[CurrencyCode, CurrencyRecord] = {}
    skipped = 0
    for entry in entries:
        if is_excluded_entry(entry):
            skipped += 1
            logger.debug("Skipping registry entry %r (%s)", entry.code, entry.country)
            continue
        records[entry.code] = CurrencyRecord(
            code=entry.code,
            numeric_code=entry.numeric_code,
            digits=parse_digits(entry.digits, code=entry.code),
        )

    logger.info("Extracted %d currencies (%d entries skipped)", len(records), skipped)
    return frozen_mapping(records)
