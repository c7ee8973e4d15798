"""Rendering of the assembled tables.

Each structure has its own serializer; nothing inspects container shapes at
runtime. The code list is rendered in catalog order (never re-sorted) and
every mapping is rendered by explicitly sorted keys, so identical tables
always produce byte-identical output.

Formats:
    - python: importable data module for the formatting library
    - json: JSON document with sorted keys

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Sequence

from currencydata.config import OutputFormat
from currencydata.types import CurrencyCode, CurrencyRecord, CurrencyTables, LocaleParentMap

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Structure serializers
    "render_code_list",
    "render_currency_records",
    "render_parent_locales",
    # Documents
    "render_python_module",
    "render_json",
    "render",
]

_INDENT = "    "


def _quote(value: str) -> str:
    """Return a double-quoted string literal valid in Python and JSON."""
    return json.dumps(value, ensure_ascii=True)


def _wrap(items: Sequence[str], width: int, indent: str) -> str:
    """Lay out rendered items ``width`` per line, each followed by a comma."""
    if width <= 0:
        msg = f"width must be positive, got {width}"
        raise ValueError(msg)
    lines = [
        indent + " ".join(f"{item}," for item in items[start : start + width])
        for start in range(0, len(items), width)
    ]
    return "\n".join(lines)


def render_code_list(
    codes: Sequence[CurrencyCode],
    *,
    width: int = 10,
    indent: str = _INDENT,
) -> str:
    """Render currency codes as quoted literals, in the given order.

    Example:
        >>> print(render_code_list(["AUD", "CAD", "CHF"], width=2, indent=""))
        "AUD", "CAD",
        "CHF",
    """
    return _wrap([_quote(code) for code in codes], width, indent)


def render_currency_records(
    records: Mapping[CurrencyCode, CurrencyRecord],
    *,
    width: int = 3,
    indent: str = _INDENT,
) -> str:
    """Render ``"CODE": ("numeric", digits)`` items sorted by code."""
    items = [
        f"{_quote(code)}: ({_quote(records[code].numeric_code)}, {records[code].digits})"
        for code in sorted(records)
    ]
    return _wrap(items, width, indent)


def render_parent_locales(
    parent_locales: LocaleParentMap,
    *,
    width: int = 3,
    indent: str = _INDENT,
) -> str:
    """Render ``"child": "parent"`` items sorted by child locale."""
    items = [
        f"{_quote(child)}: {_quote(parent_locales[child])}" for child in sorted(parent_locales)
    ]
    return _wrap(items, width, indent)


def _block(opening: str, body: str, closing: str) -> list[str]:
    if not body:
        return [opening + closing]
    return [opening, body, closing]


def render_python_module(tables: CurrencyTables) -> str:
    """Render the tables as an importable Python module.

    The module defines CLDR_VERSION, ISO_4217_PUBLISHED, CURRENCY_CODES
    (priority group, then the rest), CURRENCIES (code to
    (numeric code, digits)) and PARENT_LOCALES.
    """
    catalog = tables.catalog
    codes_body = render_code_list(catalog.priority_codes)
    if catalog.other_codes:
        codes_body += "\n\n" + f"{_INDENT}# Other currencies.\n" + render_code_list(
            catalog.other_codes
        )

    lines = [
        "# Code generated by currencydata; DO NOT EDIT.",
        '"""Currency and locale data derived from Unicode CLDR and ISO 4217."""',
        "",
        "# CLDR version from which the data is derived.",
        f"CLDR_VERSION = {_quote(tables.cldr_version)}",
        "",
        "# Publication date of the ISO 4217 list from which the data is derived.",
        f"ISO_4217_PUBLISHED = {_quote(tables.registry_published)}",
        "",
        "# Defined separately to ensure consistent ordering (G10, then others).",
        "CURRENCY_CODES = (",
        f"{_INDENT}# G10 currencies https://en.wikipedia.org/wiki/G10_currencies.",
        codes_body,
        ")",
        "",
        "# Currency code -> (numeric code, minor-unit digits).",
        *_block("CURRENCIES = {", render_currency_records(catalog.records), "}"),
        "",
        *_block("PARENT_LOCALES = {", render_parent_locales(tables.parent_locales), "}"),
    ]
    return "\n".join(lines) + "\n"


def render_json(tables: CurrencyTables) -> str:
    """Render the tables as a JSON document.

    ``currency_codes`` keeps catalog order; its first
    ``priority_currency_count`` entries are the priority group.
    """
    catalog = tables.catalog
    document = {
        "cldr_version": tables.cldr_version,
        "iso_4217_published": tables.registry_published,
        "priority_currency_count": len(catalog.priority_codes),
        "currency_codes": list(catalog.codes),
        "currencies": {
            code: {
                "numeric_code": catalog.records[code].numeric_code,
                "digits": catalog.records[code].digits,
            }
            for code in sorted(catalog.records)
        },
        "parent_locales": {
            child: tables.parent_locales[child] for child in sorted(tables.parent_locales)
        },
    }
    return json.dumps(document, indent=2, sort_keys=True, ensure_ascii=True) + "\n"


_RENDERERS: dict[OutputFormat, Callable[[CurrencyTables], str]] = {
    OutputFormat.PYTHON: render_python_module,
    OutputFormat.JSON: render_json,
}


def render(tables: CurrencyTables, output_format: OutputFormat = OutputFormat.PYTHON) -> str:
    """Render ``tables`` in ``output_format``.

    Raises:
        ValueError: If the format is unknown.
    """
    try:
        renderer = _RENDERERS[OutputFormat(output_format)]
    except (KeyError, ValueError) as e:
        msg = f"Unknown output format: {output_format!r}"
        raise ValueError(msg) from e
    return renderer(tables)
