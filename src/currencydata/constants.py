"""Shared constants for currencydata.

This module provides the curated lists and defaults used across the
reconciliation stages. Placing them here keeps every stage free of embedded
literals and provides a single source of truth for regenerations.

Constants are grouped by domain:
- Currency registry: exclusions and the fixed priority group
- Minor-unit digits: default and upper bound
- Locales: root handling and the curated exclusion set
- Sources: default download locations and timeout

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Currency registry
    "PRIORITY_CURRENCIES",
    "EXCLUDED_CURRENCY_CODES",
    "SPECIAL_COUNTRY_PREFIX",
    # Minor-unit digits
    "DEFAULT_DIGITS",
    "MAX_DIGITS",
    # Locales
    "ROOT_LOCALE",
    "DEFAULT_LOCALE",
    "EXCLUDED_LOCALES",
    "INVENTED_SCRIPT_LOCALES",
    # Sources
    "ISO_4217_URL",
    "CLDR_JSON_BASE_URL",
    "CLDR_PACKAGE_FILE",
    "CLDR_CURRENCY_DATA_FILE",
    "CLDR_PARENT_LOCALES_FILE",
    "FETCH_TIMEOUT",
]

# ============================================================================
# CURRENCY REGISTRY
# ============================================================================

# G10 currencies (https://en.wikipedia.org/wiki/G10_currencies).
# Always emitted first, in exactly this order. Hand-chosen, never derived.
PRIORITY_CURRENCIES: tuple[str, ...] = (
    "AUD", "CAD", "CHF", "EUR", "GBP", "JPY", "NOK", "NZD", "SEK", "USD",
)

# Supranational units (ADB unit of account, SUCRE, SDR) that are listed as
# regular entries but are not meant for end-user formatting.
EXCLUDED_CURRENCY_CODES: frozenset[str] = frozenset({"XUA", "XSU", "XDR"})

# ISO marks special currencies (gold, platinum, testing codes, ...) with a
# country name such as "ZZ08_Gold".
SPECIAL_COUNTRY_PREFIX: str = "ZZ"

# ============================================================================
# MINOR-UNIT DIGITS
# ============================================================================

# Used whenever a digits field is absent or malformed.
DEFAULT_DIGITS: int = 2

# Digits are emitted as a single byte; anything larger is malformed input.
MAX_DIGITS: int = 255

# ============================================================================
# LOCALES
# ============================================================================

# CLDR's top-of-hierarchy sentinel. Not exposed to consumers.
ROOT_LOCALE: str = "root"

# Replacement parent for ROOT_LOCALE; the reference locale of the table.
DEFAULT_LOCALE: str = "en"

# Locale identifiers and bare language subtags omitted from the parent map.
# A locale is excluded when it, or its leading language subtag, is listed.
EXCLUDED_LOCALES: frozenset[str] = frozenset({
    # Esperanto, Interlingua, Volapuk are made up languages.
    "eo", "ia", "vo",
    # Church Slavic, Manx, Prussian are historical languages.
    "cu", "gv", "prg",
    # Valencian differs from its parent only by a single character (è/é).
    "ca-ES-VALENCIA",
    # Africa secondary languages.
    "agq", "ak", "am", "asa", "bas", "bem", "bez", "bm", "cgg", "dav",
    "dje", "dua", "dyo", "ebu", "ee", "ewo", "ff", "ff-Latn", "guz",
    "ha", "ig", "jgo", "jmc", "kab", "kam", "kea", "kde", "ki", "kkj",
    "kln", "khq", "ksb", "ksf", "lag", "luo", "luy", "lu", "lg", "ln",
    "mas", "mer", "mua", "mgo", "mgh", "mfe", "naq", "nd", "nmg", "nnh",
    "nus", "nyn", "om", "pcm", "rof", "rwk", "saq", "seh", "ses", "sbp",
    "sg", "shi", "sn", "teo", "ti", "tzm", "twq", "vai", "vai-Latn", "vun",
    "wo", "xog", "xh", "zgh", "yav", "yo", "zu",
    # Europe secondary languages.
    "br", "dsb", "fo", "fur", "fy", "hsb", "ksh", "kw", "nds", "or",
    "rm", "se", "smn", "wae",
    # India secondary languages.
    "as", "brx", "gu", "kok", "ks", "mai", "ml", "mni", "mr", "sat",
    "sd", "te",
    # Other infrequently used locales.
    "ceb", "ccp", "chr", "ckb", "haw", "ii", "jv", "kl", "kn", "lkt",
    "lrc", "mi", "mzn", "os", "qu", "row", "sah", "su", "tt", "ug", "yi",
    # Special "grouping" locales.
    "root", "en-US-POSIX",
})

# Deseret and Shavian are made up scripts. They pass the language/region
# based exclusion check, so they are removed explicitly.
INVENTED_SCRIPT_LOCALES: tuple[str, ...] = ("en-Dsrt", "en-Shaw")

# ============================================================================
# SOURCES
# ============================================================================

# ISO 4217 "list one" (current currencies and funds), published by SIX.
ISO_4217_URL: str = (
    "https://www.six-group.com/dam/download/financial-information/"
    "data-center/iso-currrency/lists/list-one.xml"
)

# Root of the cldr-core package in the cldr-json repository.
CLDR_JSON_BASE_URL: str = (
    "https://raw.githubusercontent.com/unicode-org/cldr-json/main/cldr-json/cldr-core"
)

# Paths relative to the cldr-core root (remote and staged layout alike).
CLDR_PACKAGE_FILE: str = "package.json"
CLDR_CURRENCY_DATA_FILE: str = "supplemental/currencyData.json"
CLDR_PARENT_LOCALES_FILE: str = "supplemental/parentLocales.json"

# Seconds allowed per download.
FETCH_TIMEOUT: float = 15.0
