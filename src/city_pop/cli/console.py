"""CLI console helpers with optional Rich support.

``console`` renders diagnostics on stderr through Rich; :func:`echo`
writes match lines to stdout verbatim.  This module intentionally avoids
module-level imports of optional UI dependencies so bootstrap paths
(``--help``, ``--version``) remain functional even when Rich is not
installed.
"""

from __future__ import annotations

import sys
from typing import Any

from city_pop.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


def escape_markup(text: str) -> str:
	"""Escape *text* so Rich prints it literally inside a markup string.

	Without Rich nothing is parsed as markup, so *text* is returned as is.
	"""
	try:
		from rich.markup import escape
	except ModuleNotFoundError:
		return text
	return escape(text)


def echo(line: str) -> None:
	"""Write one data line to stdout exactly as given."""
	print(line, file=sys.stdout)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()
