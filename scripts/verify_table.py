#!/usr/bin/env python3
"""Verify a generated JSON currency table against Babel CLDR data.

Reads a table written with ``currencydata --format json`` and cross-checks
it against the CLDR data bundled with the installed Babel release.

This script is informational for data drift: ISO 4217 may list a currency
before Babel's CLDR snapshot knows it, and digit counts differ whenever the
table was built from a newer CLDR release. Only structural problems fail.

Checks:
    1. Structural: currency_codes and currencies disagree, the priority
       group is not the G10 list in order, the non-priority codes are not
       sorted, or a parent locale is "root".
    2. Unrecognized: emitted currencies Babel does not know.
    3. Discrepancies: emitted digits differ from
       babel.numbers.get_currency_precision().
    4. Parent drift: parent locales that differ from Babel's table after
       normalization. Shown only with --verbose.

Exit codes:
    0: All checks passed (drift is a warning, not a failure).
    1: Structural errors, or the table cannot be read.

Usage:
    verify_table.py TABLE [--verbose]

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from currencydata.constants import PRIORITY_CURRENCIES, ROOT_LOCALE
from currencydata.locale_utils import normalize_locale


def check_structure(document: dict[str, Any]) -> list[str]:
    """Check the ordering and consistency contracts of the table."""
    errors: list[str] = []
    codes: list[str] = document["currency_codes"]
    currencies: dict[str, Any] = document["currencies"]
    priority_count: int = document["priority_currency_count"]

    if len(set(codes)) != len(codes):
        errors.append("  currency_codes: duplicate codes")
    if set(codes) != set(currencies):
        only_list = sorted(set(codes) - set(currencies))
        only_map = sorted(set(currencies) - set(codes))
        errors.append(
            f"  currency_codes/currencies mismatch: list only {only_list}, map only {only_map}"
        )

    priority = tuple(codes[:priority_count])
    if priority != PRIORITY_CURRENCIES:
        errors.append(f"  priority group: expected {PRIORITY_CURRENCIES}, got {priority}")
    others = codes[priority_count:]
    if others != sorted(others):
        errors.append("  non-priority codes are not in code-point order")

    errors.extend(
        f"  {child}: parent is {ROOT_LOCALE!r}"
        for child, parent in sorted(document["parent_locales"].items())
        if parent == ROOT_LOCALE or child == ROOT_LOCALE
    )
    return errors


def check_unrecognized(codes: list[str], babel_currencies: set[str]) -> list[str]:
    """List emitted currencies Babel does not recognize."""
    return [f"  {code}: not recognized by Babel" for code in codes if code not in babel_currencies]


def check_digits(currencies: dict[str, Any], babel_currencies: set[str]) -> list[str]:
    """Compare emitted digits against Babel precision."""
    from babel.numbers import get_currency_precision  # noqa: PLC0415

    result: list[str] = []
    for code in sorted(currencies):
        if code not in babel_currencies:
            continue
        digits = currencies[code]["digits"]
        babel_digits = get_currency_precision(code)
        if digits != babel_digits:
            result.append(f"  {code}: table={digits}, Babel CLDR={babel_digits}")
    return result


def check_parent_drift(parent_locales: dict[str, str]) -> list[str]:
    """Compare parent locales against Babel's parent table."""
    from babel.core import get_global  # noqa: PLC0415

    babel_parents = {
        normalize_locale(child): normalize_locale(parent)
        for child, parent in get_global("parent_exceptions").items()
    }
    return [
        f"  {child}: table={parent}, Babel={babel_parents[child]}"
        for child, parent in sorted(parent_locales.items())
        if child in babel_parents
        and babel_parents[child] != ROOT_LOCALE
        and babel_parents[child] != parent
    ]


def _print_section(header: str, explanation: str, lines: list[str]) -> None:
    """Print a report section if non-empty."""
    if not lines:
        return
    print(f"{header} ({len(lines)}):")
    print(f"  ({explanation})")
    for line in lines:
        print(line)
    print()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Verify a generated JSON currency table against Babel CLDR data.",
    )
    parser.add_argument("table", type=Path, help="Table written with --format json.")
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show parent locales that differ from Babel's table.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run table verification checks."""
    args = _parse_args(argv)

    try:
        document = json.loads(args.table.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        print(f"[ERROR] Cannot read {args.table}: {e}")
        print("[EXIT-CODE] 1")
        return 1

    from babel.numbers import list_currencies  # noqa: PLC0415

    babel_currencies = list_currencies()

    try:
        errors = check_structure(document)
    except (KeyError, TypeError) as e:
        errors = [f"  table is missing {e}"]
    if errors:
        _print_section("[ERROR] Structural errors", "Ordering or consistency contract", errors)
        print(f"[FAIL] {len(errors)} structural error(s) found.")
        print("[EXIT-CODE] 1")
        return 1

    unrecognized = check_unrecognized(document["currency_codes"], babel_currencies)
    discrepancies = check_digits(document["currencies"], babel_currencies)
    drift = check_parent_drift(document["parent_locales"])

    print("Currency Table Verification")
    print("=" * 50)
    print(f"CLDR version:      {document['cldr_version']}")
    print(f"ISO 4217 list:     {document['iso_4217_published'] or 'unknown'}")
    print(f"Currencies:        {len(document['currency_codes'])}")
    print(f"Parent locales:    {len(document['parent_locales'])}")
    print(f"Babel currencies:  {len(babel_currencies)}")
    print()

    _print_section(
        "[WARN] Currencies unknown to Babel",
        "ISO 4217 may be newer than the installed Babel release",
        unrecognized,
    )
    _print_section(
        "[WARN] Digits differ from Babel",
        "The table may have been built from a different CLDR release",
        discrepancies,
    )
    if drift:
        if args.verbose:
            _print_section("[INFO] Parent locale drift", "Babel CLDR release differs", drift)
        else:
            print(f"[INFO] {len(drift)} parent locale(s) differ from Babel. Use --verbose to list.")
            print()

    print(
        f"[PASS] {len(unrecognized)} unknown, {len(discrepancies)} digit"
        f" discrepancy(ies), {len(drift)} parent drift."
    )
    print("[EXIT-CODE] 0")
    return 0


if __name__ == "__main__":
    sys.exit(main())
