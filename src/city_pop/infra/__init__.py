"""Infrastructure layer — external system integration.

This layer wraps all interaction with the filesystem, standard input
and the CSV reader.  Every raw standard-library exception must be caught
here and re-raised as a :class:`~city_pop.exceptions.CityPopError`
subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from city_pop.infra.csv_decoder import COLUMNS, CsvRowDecoder, decode_record

__all__: list[str] = [
    "COLUMNS",
    "CsvRowDecoder",
    "decode_record",
]
