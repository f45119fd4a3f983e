"""Library entry point: ``search(source, city)``.

Wires the CSV decoder into the core search service so callers outside
the CLI get the same behaviour as ``city-pop`` without touching either
layer directly.
"""

from __future__ import annotations

import os

from city_pop.core.models import MatchSet
from city_pop.core.search_service import SearchService
from city_pop.infra.csv_decoder import CsvRowDecoder


def search(source: str | os.PathLike[str] | None, city: str) -> MatchSet:
    """Return the population counts recorded for *city* in *source*.

    *source* is a path to a CSV file, or ``None`` to read standard input.

    Raises
    ------
    SourceIOError
        If the source cannot be opened or read.
    RowDecodeError
        If any record is malformed.  No partial result is returned.
    CityNotFoundError
        If no record for *city* carries a population.
    """
    return SearchService(CsvRowDecoder(source)).search(city)
