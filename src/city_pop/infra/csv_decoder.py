"""CSV backed implementation of :class:`~city_pop.core.protocols.RowSource`.

This module is the **only** place in the codebase that touches the
filesystem or standard input.  All ``OSError``, ``csv.Error`` and
field-conversion errors are caught here and re-raised as typed
:class:`~city_pop.exceptions.CityPopError` subclasses — nothing raw
escapes the infrastructure boundary.

Record layout
-------------
A header row followed by records of exactly seven columns, decoded by
position::

    country, city, accent_city, region, population, latitude, longitude

``population``, ``latitude`` and ``longitude`` may be empty, which
decodes as ``None``.
"""

from __future__ import annotations

import csv
import os
import sys
from collections.abc import Iterator, Sequence
from contextlib import AbstractContextManager, nullcontext
from typing import TextIO

from city_pop.core.models import Row
from city_pop.exceptions import RowDecodeError, SourceIOError

COLUMNS: tuple[str, ...] = (
    "country",
    "city",
    "accent_city",
    "region",
    "population",
    "latitude",
    "longitude",
)
"""Positional column names of a data record."""

_DECODE_HINT = (
    "Each record needs 7 comma-separated fields; population must be a "
    "whole number and coordinates must be decimal numbers."
)


# ---------------------------------------------------------------------------
# Field conversion (pure)
# ---------------------------------------------------------------------------

def parse_population(raw: str) -> int | None:
    """Convert a population field; empty means unknown.

    Only unsigned base-10 integers are accepted — signs, decimal points
    and surrounding whitespace are rejected.
    """
    if raw == "":
        return None
    if not (raw.isascii() and raw.isdigit()):
        raise ValueError(f"invalid population {raw!r}")
    return int(raw)


def parse_coordinate(name: str, raw: str) -> float | None:
    """Convert a latitude/longitude field; empty means unknown."""
    if raw == "":
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"invalid {name} {raw!r}") from None


def decode_record(record: Sequence[str], line: int) -> Row:
    """Decode one raw CSV record into a :class:`Row`.

    Raises
    ------
    RowDecodeError
        When the column count is wrong or a numeric field is malformed.
    """
    if len(record) != len(COLUMNS):
        raise RowDecodeError(
            f"Line {line}: expected {len(COLUMNS)} fields, found {len(record)}.",
            line=line,
            hint=_DECODE_HINT,
        )

    country, city, accent_city, region, raw_pop, raw_lat, raw_lon = record
    try:
        population = parse_population(raw_pop)
        latitude = parse_coordinate("latitude", raw_lat)
        longitude = parse_coordinate("longitude", raw_lon)
    except ValueError as exc:
        raise RowDecodeError(
            f"Line {line}: {exc}.",
            line=line,
            hint=_DECODE_HINT,
        ) from exc

    return Row(
        country=country,
        city=city,
        accent_city=accent_city,
        region=region,
        population=population,
        latitude=latitude,
        longitude=longitude,
    )


# ---------------------------------------------------------------------------
# Decoder
# ---------------------------------------------------------------------------

class CsvRowDecoder:
    """Concrete :class:`RowSource` reading CSV from a file or stdin.

    Usage::

        decoder = CsvRowDecoder("worldcitiespop.csv")
        for row in decoder.read_rows():
            ...

    Pass ``None`` as *source* to read standard input.  The source is
    opened lazily when iteration starts and closed when iteration ends,
    fails, or is abandoned; standard input is never closed.

    This class satisfies the :class:`~city_pop.core.protocols.RowSource`
    protocol structurally — no explicit inheritance required.
    """

    def __init__(self, source: str | os.PathLike[str] | None = None) -> None:
        self._source: str | os.PathLike[str] | None = source

    @property
    def source_name(self) -> str:
        """Human-readable name of the input, for messages."""
        if self._source is None:
            return "<stdin>"
        return os.fspath(self._source)

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def read_rows(self) -> Iterator[Row]:
        """Yield decoded rows in input order, skipping the header row.

        Raises
        ------
        SourceIOError
            When the source cannot be opened or a read fails.
        RowDecodeError
            When a record is malformed; iteration stops at that record.
        """
        with self._open() as handle:
            header_seen = False
            for line, record in self._records(handle):
                if not header_seen:
                    header_seen = True
                    continue
                yield decode_record(record, line)

    # ------------------------------------------------------------------
    # Stream handling
    # ------------------------------------------------------------------

    def _open(self) -> AbstractContextManager[TextIO]:
        """Open the configured source, mapping failures to ``SourceIOError``."""
        if self._source is None:
            return nullcontext(sys.stdin)
        try:
            return open(self._source, encoding="utf-8", newline="")
        except OSError as exc:
            raise SourceIOError(
                f"Cannot open {self.source_name}: {exc.strerror or exc}",
                hint="Check that the file exists and is readable.",
            ) from exc

    def _records(self, handle: TextIO) -> Iterator[tuple[int, list[str]]]:
        """Yield ``(line, record)`` pairs, skipping blank lines.

        ``line`` is the reader's line counter after the record, i.e. the
        1-based line on which the record ends.

        Invalid UTF-8 is reported without a line number.
        """
        reader = csv.reader(handle)
        while True:
            try:
                record = next(reader)
            except StopIteration:
                return
            except csv.Error as exc:
                raise RowDecodeError(
                    f"Line {reader.line_num}: malformed CSV record: {exc}",
                    line=reader.line_num,
                    hint=_DECODE_HINT,
                ) from exc
            except UnicodeDecodeError as exc:
                # Decoding runs ahead of the reader in chunks, so no line.
                raise RowDecodeError(
                    f"{self.source_name} is not valid UTF-8: {exc.reason}.",
                ) from exc
            except OSError as exc:
                raise SourceIOError(
                    f"Failed reading {self.source_name}: {exc.strerror or exc}",
                ) from exc
            if not record:
                continue
            yield reader.line_num, record
