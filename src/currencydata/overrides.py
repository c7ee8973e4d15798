"""Digit overrides from CLDR currency fractions.

CLDR digit counts reflect real-life usage more closely than ISO, specifying
0 digits (instead of ISO's 2) for about fourteen currencies such as ALL and
RSD. ISO stays authoritative for which currencies exist; CLDR is
authoritative only for the digit count.

Document layout (supplemental/currencyData.json):

    {"supplemental": {"currencyData": {"fractions": {
        "ADP": {"_rounding": "0", "_digits": "0"},
        ...
        "DEFAULT": {"_rounding": "0", "_digits": "2"}
    }}}}

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping

from currencydata.digits import parse_digits
from currencydata.errors import SourceUnavailableError
from currencydata.types import CurrencyCode, CurrencyRecord, frozen_mapping

__all__ = [
    "merge_digit_overrides",
    "parse_currency_fractions",
]

logger = logging.getLogger(__name__)


def parse_currency_fractions(data: bytes, *, source: str = "") -> dict[CurrencyCode, str]:
    """Extract the ``_digits`` value of every CLDR fractions entry.

    Entries without ``_digits`` map to an empty string so the merge stage
    can tell "listed without digits" (default applies) from "not listed"
    (registry value kept).

    Args:
        data: Raw currencyData.json document.
        source: URL or path of the document, for error messages.

    Returns:
        Currency code to raw digits string.

    Raises:
        SourceUnavailableError: If the document is not valid JSON or lacks
            supplemental.currencyData.fractions.
    """
    try:
        document = json.loads(data)
        fractions = document["supplemental"]["currencyData"]["fractions"]
    except ValueError as e:
        msg = f"CLDR currency data is not valid JSON: {e}"
        raise SourceUnavailableError(msg, source=source) from e
    except (KeyError, TypeError) as e:
        msg = f"CLDR currency data has no supplemental.currencyData.fractions: {e!r}"
        raise SourceUnavailableError(msg, source=source) from e

    if not isinstance(fractions, dict):
        msg = "CLDR currency fractions must be an object"
        raise SourceUnavailableError(msg, source=source)

    result: dict[CurrencyCode, str] = {}
    for code, info in fractions.items():
        digits = info.get("_digits", "") if isinstance(info, dict) else ""
        result[code] = str(digits)
    return result


def merge_digit_overrides(
    records: Mapping[CurrencyCode, CurrencyRecord],
    fractions: Mapping[CurrencyCode, str],
) -> Mapping[CurrencyCode, CurrencyRecord]:
    """Replace record digits with CLDR fractions where CLDR lists the code.

    Pure field-level overwrite: no records are added or removed and only
    ``digits`` changes. Codes present only in ``fractions`` are ignored.

    Args:
        records: Registry-derived records.
        fractions: Currency code to raw CLDR digits string.

    Returns:
        New read-only mapping of code to CurrencyRecord, keys sorted.
    """
    merged: dict[CurrencyCode, CurrencyRecord] = {}
    changed = 0
    for code, record in records.items():
        if code not in fractions:
            merged[code] = record
            continue
        digits = parse_digits(fractions[code], code=code)
        if digits != record.digits:
            changed += 1
            logger.debug("Digits for %s: ISO %d, CLDR %d", code, record.digits, digits)
        merged[code] = CurrencyRecord(
            code=record.code,
            numeric_code=record.numeric_code,
            digits=digits,
        )

    logger.info("Applied CLDR digit overrides (%d currencies changed)", changed)
    return frozen_mapping(merged)
