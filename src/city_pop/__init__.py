"""city-pop — look up city populations in a world-cities dataset.

Streams a delimited population file (or standard input) and reports every
record for one city that carries a known population.
"""

from city_pop.api import search
from city_pop.version import __version__

__all__: list[str] = ["__version__", "search"]
