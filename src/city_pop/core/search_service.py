"""Core search service — drives a single city lookup.

The service depends on a :class:`~city_pop.core.protocols.RowSource`
injected at construction time (dependency inversion), keeping the core
free of any filesystem access.

Guarantees
----------
* Single linear scan; the first decoder error aborts the whole search.
* Matches are returned in input row order.
* An empty result is an error (:class:`CityNotFoundError`), never an
  empty success value.
* Only :class:`~city_pop.exceptions.CityPopError` subclasses escape.
"""

from __future__ import annotations

from city_pop.core.city_filter import select_population_counts
from city_pop.core.models import MatchSet
from city_pop.core.protocols import RowSource
from city_pop.exceptions import CityNotFoundError, CityPopError, RowDecodeError


class SearchService:
    """Stateless service that looks up population counts for a city.

    Parameters
    ----------
    source:
        Any object satisfying the :class:`RowSource` protocol.
    """

    def __init__(self, source: RowSource) -> None:
        self._source: RowSource = source

    def search(self, city: str) -> MatchSet:
        """Return every population count recorded for *city*.

        Raises
        ------
        SourceIOError
            If the source cannot be opened or read.
        RowDecodeError
            If any record fails to decode.  Earlier matches are discarded.
        CityNotFoundError
            If no row matches *city* with a known population.
        """
        try:
            rows = self._source.read_rows()
            counts = tuple(select_population_counts(rows, city))
        except CityPopError:
            # Already one of ours — let it propagate unchanged.
            raise
        except Exception as exc:
            raise RowDecodeError(
                f"Unexpected row source error: {exc}",
            ) from exc

        if not counts:
            raise CityNotFoundError(
                city,
                hint="City names are matched exactly and case-sensitively.",
            )

        return MatchSet(counts=counts)
