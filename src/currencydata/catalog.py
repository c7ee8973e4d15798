"""Currency catalog assembly.

Orders currency codes for emission: the fixed priority group (G10) first,
in its hand-chosen order, then every other code in code-point order.
Downstream consumers rely on this ordering; it is a contract, not an
accident of iteration.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from currencydata.constants import PRIORITY_CURRENCIES
from currencydata.errors import IntegrityContext, MissingPriorityCurrencyError
from currencydata.types import CurrencyCatalog, CurrencyCode, CurrencyRecord, frozen_mapping

__all__ = ["assemble_catalog"]

logger = logging.getLogger(__name__)


def assemble_catalog(
    records: Mapping[CurrencyCode, CurrencyRecord],
    priority: Sequence[CurrencyCode] = PRIORITY_CURRENCIES,
) -> CurrencyCatalog:
    """Order currency codes and pair them with their records.

    Args:
        records: Merged code to CurrencyRecord mapping.
        priority: Codes emitted first, in this order. Defaults to the G10
            currencies.

    Returns:
        CurrencyCatalog holding the priority group, the sorted remainder
        and the unchanged records.

    Raises:
        ValueError: If ``priority`` lists a code more than once.
        MissingPriorityCurrencyError: If any priority code is absent from
            records. The priority list must never silently shrink.
    """
    duplicates = sorted({code for code in priority if priority.count(code) > 1})
    if duplicates:
        msg = f"Priority list repeats currencies: {', '.join(duplicates)}"
        raise ValueError(msg)

    missing = tuple(code for code in priority if code not in records)
    if missing:
        msg = (
            f"Priority currencies missing from the currency set: {', '.join(missing)}"
        )
        context = IntegrityContext(
            component="catalog",
            operation="assemble",
            key=",".join(missing),
            expected=",".join(priority),
            actual=f"{len(records)} currencies",
        )
        raise MissingPriorityCurrencyError(msg, context, missing_codes=missing)

    priority_set = frozenset(priority)
    other_codes = tuple(code for code in sorted(records) if code not in priority_set)

    logger.info(
        "Assembled catalog: %d priority + %d other currencies",
        len(priority),
        len(other_codes),
    )
    return CurrencyCatalog(
        priority_codes=tuple(priority),
        other_codes=other_codes,
        records=frozen_mapping(records),
    )
