"""Raw input for the pipeline: download, staging and loading.

Three ways to obtain CLDR data:
    - Remote: download cldr-core JSON files into a staging directory
    - Directory: read a local cldr-core checkout (same layout)
    - Babel: use the CLDR data bundled with the installed Babel release

The ISO 4217 registry is either downloaded into the staging directory or
read from a local file.

Every function returns fully retrieved content or raises
SourceUnavailableError. There is no partial-fetch recovery.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from contextlib import closing
from http.client import HTTPException
from pathlib import Path
from urllib.error import URLError
from urllib.request import Request, urlopen

from currencydata.constants import (
    CLDR_CURRENCY_DATA_FILE,
    CLDR_JSON_BASE_URL,
    CLDR_PACKAGE_FILE,
    CLDR_PARENT_LOCALES_FILE,
    FETCH_TIMEOUT,
    ISO_4217_URL,
    ROOT_LOCALE,
)
from currencydata.errors import SourceUnavailableError
from currencydata.locales import parse_parent_locales
from currencydata.overrides import parse_currency_fractions
from currencydata.types import CLDRData

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Transport
    "fetch_url",
    # Staging
    "ISO_REGISTRY_FILENAME",
    "CLDR_DIRNAME",
    "stage_iso_registry",
    "stage_cldr",
    # Loading
    "read_source_file",
    "load_cldr_directory",
    "load_babel_cldr",
    "root_parented_locales",
]

logger = logging.getLogger(__name__)

ISO_REGISTRY_FILENAME = "list-one.xml"
CLDR_DIRNAME = "cldr-core"

_CLDR_FILES = (CLDR_PACKAGE_FILE, CLDR_CURRENCY_DATA_FILE, CLDR_PARENT_LOCALES_FILE)

_USER_AGENT = "currencydata (+https://pypi.org/project/currencydata/)"


# ============================================================================
# TRANSPORT
# ============================================================================


def fetch_url(url: str, *, timeout: float = FETCH_TIMEOUT) -> bytes:
    """Download ``url`` and return the complete response body.

    Args:
        url: http(s) URL.
        timeout: Seconds allowed for the request.

    Returns:
        Response body.

    Raises:
        SourceUnavailableError: On network errors, timeouts and any status
            other than 200.
    """
    request = Request(url, headers={"User-Agent": _USER_AGENT})  # noqa: S310
    try:
        with closing(urlopen(request, timeout=timeout)) as response:  # noqa: S310
            status = getattr(response, "status", 200)
            if status != 200:
                msg = f"GET {url!r}: HTTP {status}"
                raise SourceUnavailableError(msg, source=url)
            data: bytes = response.read()
    except URLError as e:
        msg = f"GET {url!r}: {e.reason}"
        raise SourceUnavailableError(msg, source=url) from e
    except (OSError, HTTPException) as e:
        msg = f"GET {url!r}: {e}"
        raise SourceUnavailableError(msg, source=url) from e

    logger.debug("Fetched %s (%d bytes)", url, len(data))
    return data


# ============================================================================
# STAGING
# ============================================================================


def _write_staged(path: Path, data: bytes) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
    except OSError as e:
        msg = f"Cannot stage {path}: {e.strerror or e}"
        raise SourceUnavailableError(msg, source=str(path)) from e


def stage_iso_registry(
    staging_dir: Path,
    *,
    url: str = ISO_4217_URL,
    timeout: float = FETCH_TIMEOUT,
) -> Path:
    """Download ISO 4217 list one into ``staging_dir``.

    Returns:
        Path of the staged XML file.

    Raises:
        SourceUnavailableError: If the download or staging write fails.
    """
    target = staging_dir / ISO_REGISTRY_FILENAME
    _write_staged(target, fetch_url(url, timeout=timeout))
    return target


def stage_cldr(
    staging_dir: Path,
    *,
    base_url: str = CLDR_JSON_BASE_URL,
    timeout: float = FETCH_TIMEOUT,
) -> Path:
    """Download the cldr-core files the pipeline needs into ``staging_dir``.

    The files keep their cldr-core relative paths, so the staged directory
    can be read with load_cldr_directory().

    Returns:
        Path of the staged cldr-core directory.

    Raises:
        SourceUnavailableError: If any download or staging write fails.
    """
    cldr_dir = staging_dir / CLDR_DIRNAME
    base = base_url.rstrip("/")
    for relative in _CLDR_FILES:
        _write_staged(cldr_dir / relative, fetch_url(f"{base}/{relative}", timeout=timeout))
    return cldr_dir


# ============================================================================
# LOADING
# ============================================================================


def read_source_file(path: Path) -> bytes:
    """Read a staged or local source file.

    Raises:
        SourceUnavailableError: If the file is missing or unreadable.
    """
    try:
        return path.read_bytes()
    except OSError as e:
        msg = f"Cannot read {path}: {e.strerror or e}"
        raise SourceUnavailableError(msg, source=str(path)) from e


def _parse_cldr_version(data: bytes, *, source: str) -> str:
    try:
        version = json.loads(data)["version"]
    except ValueError as e:
        msg = f"CLDR package metadata is not valid JSON: {e}"
        raise SourceUnavailableError(msg, source=source) from e
    except (KeyError, TypeError) as e:
        msg = "CLDR package metadata has no version"
        raise SourceUnavailableError(msg, source=source) from e
    if not isinstance(version, str) or not version:
        msg = f"CLDR package version must be a non-empty string, got {version!r}"
        raise SourceUnavailableError(msg, source=source)
    return version


def load_cldr_directory(cldr_dir: Path) -> CLDRData:
    """Load CLDR data from a cldr-core directory.

    Expects package.json, supplemental/currencyData.json and
    supplemental/parentLocales.json below ``cldr_dir``.

    Raises:
        SourceUnavailableError: If a file is missing or malformed.
    """
    package_path = cldr_dir / CLDR_PACKAGE_FILE
    fractions_path = cldr_dir / CLDR_CURRENCY_DATA_FILE
    parents_path = cldr_dir / CLDR_PARENT_LOCALES_FILE

    version = _parse_cldr_version(read_source_file(package_path), source=str(package_path))
    fractions = parse_currency_fractions(
        read_source_file(fractions_path), source=str(fractions_path)
    )
    parent_locales = parse_parent_locales(
        read_source_file(parents_path), source=str(parents_path)
    )

    logger.info("Loaded CLDR %s from %s", version, cldr_dir)
    return CLDRData(version=version, fractions=fractions, parent_locales=parent_locales)


def _is_script_subtag(subtag: str) -> bool:
    return len(subtag) == 4 and subtag.isalpha() and subtag.istitle()


def root_parented_locales(
    identifiers: Iterable[str], likely_subtags: Mapping[str, str]
) -> tuple[str, ...]:
    """Find ``lang_Script`` locales whose parent is root.

    CLDR parents a script locale to root when its script is not the
    default script of its language (sr_Latn, zh_Hant); truncation would
    otherwise fall back to the wrong script. The default script is the
    one likely subtags expand the bare language to.

    Args:
        identifiers: POSIX locale identifiers (babel.localedata).
        likely_subtags: Language to likely full identifier, such as
            ``{"zh": "zh_Hans_CN"}``.

    Returns:
        Matching identifiers, sorted. Languages without a likely script
        are skipped.

    Example:
        >>> root_parented_locales(["zh_Hans", "zh_Hant", "zh_Hant_HK"], {"zh": "zh_Hans_CN"})
        ('zh_Hant',)
    """
    result: list[str] = []
    for identifier in identifiers:
        parts = identifier.split("_")
        if len(parts) != 2 or not _is_script_subtag(parts[1]):
            continue
        language, script = parts
        likely = likely_subtags.get(language, "").split("_")
        if len(likely) < 2 or not _is_script_subtag(likely[1]):
            continue
        if likely[1] != script:
            result.append(identifier)
    return tuple(sorted(result))


def load_babel_cldr() -> CLDRData:
    """Load CLDR data bundled with the installed Babel release.

    Babel stores fractions as (digits, rounding, cash_digits, cash_rounding)
    tuples and locale identifiers in POSIX form (en_150); the parent pairs
    are normalized later by the resolver. Babel drops root from its parent
    table, so root-parented script locales are restored with
    root_parented_locales(). The version label names the Babel release
    (babel-2.17.0), which determines the bundled CLDR release.

    Raises:
        SourceUnavailableError: If Babel's global data lacks the tables.
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    import babel  # noqa: PLC0415
    from babel.core import get_global  # noqa: PLC0415
    from babel.localedata import locale_identifiers  # noqa: PLC0415

    try:
        raw_fractions = get_global("currency_fractions")
        raw_parents = get_global("parent_exceptions")
        likely_subtags = get_global("likely_subtags")
    except KeyError as e:
        msg = f"Babel CLDR data has no {e.args[0]!r} table"
        raise SourceUnavailableError(msg, source="babel") from e

    fractions = {code: str(info[0]) for code, info in raw_fractions.items()}
    parents = {child: str(parent) for child, parent in raw_parents.items()}
    # Babel's parent table omits every root entry; rebuild them.
    root_children = root_parented_locales(locale_identifiers(), likely_subtags)
    for child in root_children:
        parents.setdefault(child, ROOT_LOCALE)
    logger.debug("Restored %d root-parented locales from Babel", len(root_children))
    parent_locales = tuple((child, parents[child]) for child in sorted(parents))
    # A Babel release pins exactly one CLDR release.
    version = f"babel-{babel.__version__}"

    logger.info("Loaded CLDR %s bundled with Babel", version)
    return CLDRData(version=version, fractions=fractions, parent_locales=parent_locales)
