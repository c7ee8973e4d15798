"""Minor-unit digit parsing shared by the registry and override stages.

Both sources carry digit counts as strings. ISO uses "N.A." for currencies
without minor units defined (precious metals, testing codes) and CLDR omits
``_digits`` for some entries. Neither case is an error: the value defaults
to DEFAULT_DIGITS.

Absent and malformed values are reported separately (DigitsStatus) so the
two cases stay distinguishable in logs and tests, even though they resolve
to the same default.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from currencydata.constants import DEFAULT_DIGITS, MAX_DIGITS

__all__ = [
    "DigitsStatus",
    "classify_digits",
    "parse_digits",
]

logger = logging.getLogger(__name__)


class DigitsStatus(StrEnum):
    """Outcome of parsing a minor-unit digits field.

    StrEnum provides automatic string conversion: str(DigitsStatus.ABSENT) == "absent"
    """

    PARSED = "parsed"
    """Field held a valid digit count."""

    ABSENT = "absent"
    """Field was missing or empty; default applied."""

    MALFORMED = "malformed"
    """Field was present but not a valid digit count; default applied."""


def classify_digits(raw: str | None) -> tuple[int, DigitsStatus]:
    """Parse a digits field and report which case applied.

    Only ASCII decimal digits are accepted: no sign, no surrounding
    whitespace, no underscores. Values above MAX_DIGITS are malformed.

    Args:
        raw: Field value, or None when the field is missing.

    Returns:
        Tuple of (digit count, status). The count is DEFAULT_DIGITS unless
        status is PARSED.

    Example:
        >>> classify_digits("0")
        (0, <DigitsStatus.PARSED: 'parsed'>)
        >>> classify_digits("N.A.")
        (2, <DigitsStatus.MALFORMED: 'malformed'>)
    """
    if not raw:
        return DEFAULT_DIGITS, DigitsStatus.ABSENT
    if not (raw.isascii() and raw.isdigit()):
        return DEFAULT_DIGITS, DigitsStatus.MALFORMED
    value = int(raw)
    if value > MAX_DIGITS:
        return DEFAULT_DIGITS, DigitsStatus.MALFORMED
    return value, DigitsStatus.PARSED


def parse_digits(raw: str | None, *, code: str = "") -> int:
    """Parse a digits field, defaulting to DEFAULT_DIGITS.

    Never raises. Absent values are logged at DEBUG, malformed values at
    WARNING.

    Args:
        raw: Field value, or None when the field is missing.
        code: Currency code, for log messages only.

    Returns:
        Digit count.
    """
    digits, status = classify_digits(raw)
    if status is DigitsStatus.ABSENT:
        logger.debug("No minor-unit digits for %s, using %d", code or "?", digits)
    elif status is DigitsStatus.MALFORMED:
        logger.warning(
            "Malformed minor-unit digits %r for %s, using %d", raw, code or "?", digits
        )
    return digits
