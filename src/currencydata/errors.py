"""Error taxonomy for currency table generation.

These exceptions abort a run. A currency table with missing or inconsistent
entries is worse than no table, so nothing here is caught inside the
pipeline; the CLI maps each category to an exit code.

Design:
    - Every error exposes its ErrorCategory
    - Carry diagnostic context for post-mortem analysis
    - Immutable after construction
    - @final decorator prevents subclassing of leaf types

Hierarchy:
    CurrencyDataError (base)
    ├─ SourceUnavailableError (fetch or parse of raw input failed)
    ├─ DataIntegrityError (assembled data violates an invariant)
    │  └─ MissingPriorityCurrencyError (priority code absent from records)
    └─ ImmutabilityViolationError (mutation attempt on an error object)

Malformed numeric fields are the third category; they are recovered locally
by currencydata.digits and never raised.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, final

__all__ = [
    "CurrencyDataError",
    "DataIntegrityError",
    "ErrorCategory",
    "ImmutabilityViolationError",
    "IntegrityContext",
    "MissingPriorityCurrencyError",
    "SourceUnavailableError",
]


class ErrorCategory(StrEnum):
    """Error categorization for currency table generation.

    Categories:
        SOURCE_UNAVAILABLE: A source collaborator failed to retrieve or parse
            raw input.
        DATA_INTEGRITY: Merged or assembled data violates an invariant.
        MALFORMED_FIELD: A field failed to parse into its numeric form.
            Recovered locally with a default; never raised.
        INTERNAL: Misuse of the error objects themselves.
    """

    SOURCE_UNAVAILABLE = "source_unavailable"
    DATA_INTEGRITY = "data_integrity"
    MALFORMED_FIELD = "malformed_field"
    INTERNAL = "internal"


@dataclass(frozen=True, slots=True)
class IntegrityContext:
    """Context for integrity error diagnosis.

    Attributes:
        component: Pipeline stage where the error occurred (catalog, registry)
        operation: Operation being performed (assemble, merge)
        key: Identifier involved (optional)
        expected: Expected value (optional)
        actual: Actual value found (optional)
    """

    component: str
    operation: str
    key: str | None = None
    expected: str | None = None
    actual: str | None = None


class CurrencyDataError(Exception):
    """Base exception for all currencydata failures.

    Immutable after construction to keep error evidence intact while it
    propagates to the top level.
    """

    __slots__ = ("_frozen",)

    category: ClassVar[ErrorCategory] = ErrorCategory.INTERNAL

    _frozen: bool

    # Python's exception handling sets these attributes when propagating exceptions.
    _PYTHON_EXCEPTION_ATTRS: ClassVar[frozenset[str]] = frozenset(
        ("__traceback__", "__context__", "__cause__", "__suppress_context__", "__notes__")
    )

    def __init__(self, message: str) -> None:
        super().__init__(message)
        object.__setattr__(self, "_frozen", True)

    def __setattr__(self, name: str, value: object) -> None:
        """Reject all attribute mutations after initialization.

        Raises:
            ImmutabilityViolationError: If attempting to modify after construction
        """
        if name in self._PYTHON_EXCEPTION_ATTRS:
            object.__setattr__(self, name, value)
            return
        if getattr(self, "_frozen", False):
            msg = f"Cannot modify error attribute: {name}"
            raise ImmutabilityViolationError(msg)
        object.__setattr__(self, name, value)

    def __delattr__(self, name: str) -> None:
        """Reject all attribute deletions.

        Raises:
            ImmutabilityViolationError: Always
        """
        msg = f"Cannot delete error attribute: {name}"
        raise ImmutabilityViolationError(msg)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r})"


@final
class ImmutabilityViolationError(CurrencyDataError):
    """Attempt to mutate an error object after construction."""


@final
class SourceUnavailableError(CurrencyDataError):
    """A source collaborator failed to retrieve or parse raw input.

    Raised for network failures, non-200 responses, missing staged files
    and documents that do not have the expected structure. There is no
    partial-fetch recovery: the whole run aborts.

    Attributes:
        source: URL or filesystem path of the failing input
    """

    __slots__ = ("_source",)

    category = ErrorCategory.SOURCE_UNAVAILABLE

    _source: str

    def __init__(self, message: str, *, source: str = "") -> None:
        """Initialize SourceUnavailableError.

        Args:
            message: Human-readable error description
            source: URL or path of the failing input
        """
        # Must set before calling super().__init__ which freezes
        object.__setattr__(self, "_source", source)
        super().__init__(message)

    @property
    def source(self) -> str:
        """URL or filesystem path of the failing input."""
        return self._source

    def __repr__(self) -> str:
        return f"SourceUnavailableError({self.args[0]!r}, source={self._source!r})"


class DataIntegrityError(CurrencyDataError):
    """Assembled data violates an internal invariant.

    Attributes:
        context: Structured diagnostic context for post-mortem analysis
    """

    __slots__ = ("_context",)

    category = ErrorCategory.DATA_INTEGRITY

    _context: IntegrityContext | None

    def __init__(
        self,
        message: str,
        context: IntegrityContext | None = None,
    ) -> None:
        """Initialize DataIntegrityError.

        Args:
            message: Human-readable error description
            context: Structured diagnostic context (optional)
        """
        object.__setattr__(self, "_context", context)
        super().__init__(message)

    @property
    def context(self) -> IntegrityContext | None:
        """Structured diagnostic context."""
        return self._context

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, context={self._context!r})"


@final
class MissingPriorityCurrencyError(DataIntegrityError):
    """A fixed-priority currency is absent from the merged record set.

    Signals that the hard-coded priority list drifted out of sync with
    the real currency set.

    Attributes:
        missing_codes: Priority codes not found, in priority order
    """

    __slots__ = ("_missing_codes",)

    _missing_codes: tuple[str, ...]

    def __init__(
        self,
        message: str,
        context: IntegrityContext | None = None,
        *,
        missing_codes: tuple[str, ...] = (),
    ) -> None:
        """Initialize MissingPriorityCurrencyError.

        Args:
            message: Human-readable error description
            context: Structured diagnostic context (optional)
            missing_codes: Priority codes not found in the records
        """
        object.__setattr__(self, "_missing_codes", tuple(missing_codes))
        super().__init__(message, context)

    @property
    def missing_codes(self) -> tuple[str, ...]:
        """Priority codes not found, in priority order."""
        return self._missing_codes

    def __repr__(self) -> str:
        return (
            f"MissingPriorityCurrencyError({self.args[0]!r}, "
            f"missing_codes={self._missing_codes!r})"
        )
