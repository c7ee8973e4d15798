"""Parent-locale resolution from CLDR data.

CLDR's parent-locale table lists the locales whose parent is not obtained
by truncation (en-150 -> en-001, es-AR -> es-419, az-Arab -> root). The
resolved map feeds fallback chains in the formatting library, so:

- "root" is never exposed; it is replaced by DEFAULT_LOCALE.
- Locales outside the supported set (EXCLUDED_LOCALES) are skipped.
- Invented-script locales (INVENTED_SCRIPT_LOCALES) are removed.

Document layout (supplemental/parentLocales.json):

    {"supplemental": {"parentLocales": {"parentLocale": {
        "az-Arab": "root",
        "en-150": "en-001",
        ...
    }}}}

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

from currencydata.constants import (
    DEFAULT_LOCALE,
    EXCLUDED_LOCALES,
    INVENTED_SCRIPT_LOCALES,
    ROOT_LOCALE,
)
from currencydata.errors import SourceUnavailableError
from currencydata.locale_utils import language_subtag, normalize_locale
from currencydata.types import LocaleCode, LocaleParentMap, ParentLocalePair, frozen_mapping

__all__ = [
    "is_excluded_locale",
    "parse_parent_locales",
    "resolve_parent_locales",
]

logger = logging.getLogger(__name__)


def parse_parent_locales(data: bytes, *, source: str = "") -> tuple[ParentLocalePair, ...]:
    """Extract (child, parent) pairs from CLDR parentLocales.json.

    Only the general ``parentLocale`` table is read; the collation and
    plural specific tables do not affect number formatting.

    Args:
        data: Raw parentLocales.json document.
        source: URL or path of the document, for error messages.

    Returns:
        Pairs sorted by child locale.

    Raises:
        SourceUnavailableError: If the document is not valid JSON or lacks
            supplemental.parentLocales.parentLocale.
    """
    try:
        document = json.loads(data)
        table = document["supplemental"]["parentLocales"]["parentLocale"]
    except ValueError as e:
        msg = f"CLDR parent locales are not valid JSON: {e}"
        raise SourceUnavailableError(msg, source=source) from e
    except (KeyError, TypeError) as e:
        msg = f"CLDR parent locales have no supplemental.parentLocales.parentLocale: {e!r}"
        raise SourceUnavailableError(msg, source=source) from e

    if not isinstance(table, dict):
        msg = "CLDR parentLocale table must be an object"
        raise SourceUnavailableError(msg, source=source)

    return tuple((child, str(table[child])) for child in sorted(table))


def is_excluded_locale(locale: LocaleCode) -> bool:
    """Check whether a locale is left out of the parent map.

    A locale is excluded when the full identifier or its leading language
    subtag is in EXCLUDED_LOCALES. The check is a pure set lookup, so the
    result never depends on the order in which locales are processed.

    Example:
        >>> is_excluded_locale("ff-Adlm-GN")
        True
        >>> is_excluded_locale("ca-ES-VALENCIA")
        True
        >>> is_excluded_locale("ca-ES")
        False
    """
    normalized = normalize_locale(locale)
    return normalized in EXCLUDED_LOCALES or language_subtag(normalized) in EXCLUDED_LOCALES


def resolve_parent_locales(pairs: Iterable[ParentLocalePair]) -> LocaleParentMap:
    """Build the child to parent locale map.

    Per pair: the root parent is rewritten to DEFAULT_LOCALE, excluded
    children are dropped, everything else is kept. Invented-script locales
    are then removed. Identifiers are normalized to BCP-47 first, so Babel
    (en_150) and CLDR JSON (en-150) input resolve identically.

    Args:
        pairs: Raw (child, parent) pairs.

    Returns:
        Read-only mapping of child to parent, keys sorted.
    """
    parents: dict[LocaleCode, LocaleCode] = {}
    skipped = 0
    for raw_child, raw_parent in pairs:
        child = normalize_locale(raw_child)
        parent = normalize_locale(raw_parent)
        if parent == ROOT_LOCALE:
            parent = DEFAULT_LOCALE
        if is_excluded_locale(child):
            skipped += 1
            logger.debug("Skipping excluded locale %s", child)
            continue
        parents[child] = parent

    for locale in INVENTED_SCRIPT_LOCALES:
        parents.pop(locale, None)

    logger.info("Resolved %d parent locales (%d excluded)", len(parents), skipped)
    return frozen_mapping(parents)
