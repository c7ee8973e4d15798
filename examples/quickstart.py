"""Quickstart example for currencydata.

This example demonstrates building the currency table as a library.

Note: Example 1 downloads ISO 4217 list one unless a local copy is passed
as the first argument:

    python examples/quickstart.py path/to/list-one.xml
"""

import sys
import tempfile
from pathlib import Path

from currencydata import GeneratorConfig, OutputFormat, SourceKind, build_tables, generate, render
from currencydata.errors import SourceUnavailableError
from currencydata.sources import load_babel_cldr, read_source_file, stage_iso_registry
from currencydata.types import RawSources

iso_file = Path(sys.argv[1]) if len(sys.argv) > 1 else None

# Example 1: Reconcile sources in memory
print("=" * 50)
print("Example 1: Build Tables (Babel CLDR + ISO 4217)")
print("=" * 50)

with tempfile.TemporaryDirectory() as staging:
    try:
        registry = iso_file or stage_iso_registry(Path(staging))
        raw = RawSources(registry_xml=read_source_file(registry), cldr=load_babel_cldr())
    except SourceUnavailableError as e:
        print(f"Source unavailable: {e}")
        sys.exit(2)

tables = build_tables(raw)
print(f"CLDR: {tables.cldr_version}, ISO 4217 list of {tables.registry_published}")
print(f"Priority currencies: {', '.join(tables.catalog.priority_codes)}")
print(f"Other currencies: {len(tables.catalog.other_codes)}")
# Output: Priority currencies: AUD, CAD, CHF, EUR, GBP, JPY, NOK, NZD, SEK, USD

# Example 2: Look up records
print("\n" + "=" * 50)
print("Example 2: Currency Records")
print("=" * 50)

for code in ("USD", "JPY", "KWD", "ALL"):
    record = tables.catalog.records.get(code)
    if record is not None:
        print(f"{code}: numeric {record.numeric_code}, {record.digits} digits")
# Output: ALL: numeric 008, 0 digits  (CLDR overrides ISO's 2)

# Example 3: Parent locales
print("\n" + "=" * 50)
print("Example 3: Parent Locales")
print("=" * 50)

for child in ("en-150", "es-AR", "zh-Hant"):
    print(f"{child} -> {tables.parent_locales.get(child, '(truncation)')}")
# Output: zh-Hant -> en  (root is never exposed)

# Example 4: Render without writing
print("\n" + "=" * 50)
print("Example 4: Render as JSON")
print("=" * 50)

document = render(tables, OutputFormat.JSON)
print(document[:200] + "...")

# Example 5: Full run writing a file
print("\n" + "=" * 50)
print("Example 5: generate()")
print("=" * 50)

with tempfile.TemporaryDirectory() as out_dir:
    config = GeneratorConfig(
        output=Path(out_dir) / "currency_data.py",
        source=SourceKind.BABEL,
        iso_file=iso_file,
    )
    try:
        written = generate(config)
    except SourceUnavailableError as e:
        print(f"Source unavailable: {e}")
    else:
        print(f"Wrote {len(written.catalog)} currencies to {config.output.name}")

print("\n" + "=" * 50)
print("All examples completed successfully!")
print("=" * 50)
