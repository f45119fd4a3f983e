"""Custom exception hierarchy for city-pop.

All exceptions that cross layer boundaries must inherit from
:class:`CityPopError`.  Raw standard-library exceptions (``OSError``,
``csv.Error``, ``ValueError``) must NEVER propagate beyond the
infrastructure layer — they are caught there and re-raised as a typed
subclass defined here, with the original attached as ``__cause__``.

Hierarchy
---------
CityPopError
├── SourceIOError        (ErrorKind.IO)
├── RowDecodeError       (ErrorKind.DECODE)
└── CityNotFoundError    (ErrorKind.NOT_FOUND)

The search taxonomy is closed: every search failure is exactly one of
the three kinds above.  :class:`EnvironmentError` is internal to the CLI
layer and only signals a missing optional UI dependency.
"""

from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    """Discriminator for the three ways a search can fail."""

    IO = "io"
    """The source could not be opened or read."""

    DECODE = "decode"
    """A record could not be decoded into a row."""

    NOT_FOUND = "not_found"
    """The scan finished without a single qualifying match."""


class CityPopError(Exception):
    """Base exception for all city-pop errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    kind: ErrorKind | None = None
    """Search failure kind, ``None`` for errors outside the taxonomy."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Source access ---------------------------------------------------------

class SourceIOError(CityPopError):
    """Raised when the data source cannot be opened or read."""

    kind = ErrorKind.IO


# --- Record decoding -------------------------------------------------------

class RowDecodeError(CityPopError):
    """Raised when a record does not decode into a row.

    The scan is aborted at the first such record; ``line`` is the
    1-based input line where the offending record ends, when known.
    """

    kind = ErrorKind.DECODE

    def __init__(
        self,
        message: str,
        *,
        line: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.line: int | None = line


# --- Empty result ----------------------------------------------------------

class CityNotFoundError(CityPopError):
    """Raised when no record matches the query and carries a population."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, city: str, *, hint: str | None = None) -> None:
        super().__init__(f"No matching cities with a population were found: {city!r}", hint=hint)
        self.city: str = city


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CityPopError):
    """Raised when an optional runtime dependency is not available."""
