"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from city_pop.core.city_filter import select_population_counts
from city_pop.core.models import MatchSet, PopulationCount, Row
from city_pop.core.protocols import RowSource
from city_pop.core.search_service import SearchService

__all__: list[str] = [
    "MatchSet",
    "PopulationCount",
    "Row",
    "RowSource",
    "SearchService",
    "select_population_counts",
]
