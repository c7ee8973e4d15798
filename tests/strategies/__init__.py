"""Hypothesis strategies for currencydata property-based testing.

Strategies are organized by domain:

- registry: ISO 4217 codes, digit fields and registry entries
- locales: CLDR locale identifiers and parent-locale pairs

Usage:
    from tests.strategies.registry import registry_entries, digit_fields
    from tests.strategies.locales import locale_ids, parent_pairs
"""

from .locales import excluded_locale_ids, locale_ids, parent_pairs
from .registry import (
    alpha3_codes,
    digit_fields,
    qualifying_entries,
    record_sets,
    registry_entries,
)

__all__ = [
    "alpha3_codes",
    "digit_fields",
    "excluded_locale_ids",
    "locale_ids",
    "parent_pairs",
    "qualifying_entries",
    "record_sets",
    "registry_entries",
]
