"""Domain models for city-pop.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and must remain pure across the entire lifecycle.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Input record
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Row:
    """One decoded record of the world-cities dataset.

    The numeric fields are optional because the source data omits them
    for many places; ``None`` means "absent", which is distinct from a
    population of zero.
    """

    country: str
    """Lower-case ISO country code (e.g. ``us``)."""

    city: str
    """Normalised city name, the field queries are matched against."""

    accent_city: str
    """Display variant of the city name, with accents preserved."""

    region: str
    """Region code within the country (e.g. ``IL``)."""

    population: int | None
    """Number of inhabitants, or ``None`` if unknown."""

    latitude: float | None
    """Latitude in decimal degrees, or ``None`` if unknown."""

    longitude: float | None
    """Longitude in decimal degrees, or ``None`` if unknown."""


# ---------------------------------------------------------------------------
# Search result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class PopulationCount:
    """A single match: a city, its country and its known population."""

    city: str
    country: str
    count: int

    def __str__(self) -> str:
        return f"{self.city}, {self.country}: {self.count}"


@dataclass(frozen=True, slots=True)
class MatchSet:
    """Immutable, ordered collection of :class:`PopulationCount` entries.

    Order follows the input rows.  Convenience dunder methods make the
    collection usable in boolean, length and iteration contexts.
    """

    counts: tuple[PopulationCount, ...]

    def __len__(self) -> int:
        return len(self.counts)

    def __bool__(self) -> bool:
        return len(self.counts) > 0

    def __iter__(self) -> Iterator[PopulationCount]:
        return iter(self.counts)
