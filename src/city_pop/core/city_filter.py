"""Pure row filtering for city lookups.

Every function in this module is a **pure** transformation over an
iterable of rows — no I/O, no side effects, fully deterministic.

Selection rules (applied per row, in input order):

1. **Population** — rows without a known population are skipped.
2. **City** — the row's ``city`` must equal the query exactly
   (case-sensitive, no normalisation).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from city_pop.core.models import PopulationCount, Row


def has_population(row: Row) -> bool:
    """Return ``True`` when *row* carries a population value.

    A population of ``0`` is a known value and counts as present.
    """
    return row.population is not None


def matches_city(row: Row, city: str) -> bool:
    """Return ``True`` when *row* is for exactly *city*."""
    return row.city == city


def to_population_count(row: Row) -> PopulationCount:
    """Build a :class:`PopulationCount` from a row with a population."""
    if row.population is None:
        raise ValueError(f"Row for {row.city!r} has no population.")
    return PopulationCount(city=row.city, country=row.country, count=row.population)


def select_population_counts(
    rows: Iterable[Row],
    city: str,
) -> Iterator[PopulationCount]:
    """Lazily yield a :class:`PopulationCount` for every qualifying row.

    Errors raised while iterating *rows* propagate to the caller
    unchanged, so a decoder failure stops the selection immediately.
    """
    for row in rows:
        if not has_population(row):
            continue
        if matches_city(row, city):
            yield to_population_count(row)
