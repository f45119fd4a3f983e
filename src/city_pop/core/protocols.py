"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from city_pop.core.models import Row


class RowSource(Protocol):
    """Contract for record decoders.

    Any object that implements :meth:`read_rows` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def read_rows(self) -> Iterator[Row]:
        """Yield decoded rows lazily, in input order.

        The iterator is single-pass.  Implementations must release any
        underlying resource when the iterator is exhausted, raises, or
        is closed early, and must map all backend-specific exceptions to
        :class:`~city_pop.exceptions.CityPopError` subclasses.

        Raises
        ------
        SourceIOError
            When the source cannot be opened or read.
        RowDecodeError
            When a record cannot be decoded into a :class:`Row`.
        """
        ...  # pragma: no cover
