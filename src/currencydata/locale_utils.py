"""Locale utilities for POSIX to BCP-47 conversion.

CLDR JSON spells locale identifiers with hyphens (en-150), while Babel's
bundled CLDR data uses underscores (en_150). Identifiers are normalized to
the hyphen form at the source boundary so exclusion matching and output
never depend on where the data came from.

Python 3.13+.
"""

from __future__ import annotations

__all__ = [
    "language_subtag",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert a POSIX-style locale identifier to BCP-47 form.

    Only separators change; subtag casing is preserved because CLDR already
    uses canonical casing (zh-Hant-MO, ca-ES-VALENCIA).

    Args:
        locale_code: Locale identifier (e.g., "en_150", "zh_Hant_MO")

    Returns:
        Hyphen-separated identifier (e.g., "en-150", "zh-Hant-MO")

    Example:
        >>> normalize_locale("en_150")
        'en-150'
        >>> normalize_locale("es-419")  # Already normalized
        'es-419'
    """
    return locale_code.replace("_", "-")


def language_subtag(locale_code: str) -> str:
    """Return the leading language subtag of a locale identifier.

    Example:
        >>> language_subtag("ff-Latn-GH")
        'ff'
        >>> language_subtag("en")
        'en'
    """
    return normalize_locale(locale_code).split("-", 1)[0]
