"""CLI application entry point and command routing for city-pop.

This module is the **sole error boundary** for the entire application.
It catches :class:`~city_pop.exceptions.CityPopError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core/service
  and infrastructure layers.
* ``print()`` is forbidden outside the CLI layer.  Diagnostics go through
  the Rich console proxy; match lines go through ``echo`` so data is
  written verbatim.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from city_pop.cli import exit_codes
from city_pop.cli.console import console, echo, escape_markup
from city_pop.exceptions import CityNotFoundError, CityPopError
from city_pop.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``city-pop [-f FILE] [-q] <city>`` — look up one city
    * ``city-pop --version``
    """
    parser = argparse.ArgumentParser(
        prog="city-pop",
        description="Look up the population of a city in a world-cities CSV file.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-f",
        "--file",
        metavar="PATH",
        default=None,
        help="Choose an input file, instead of using STDIN.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Exit non-zero without a message when no match is found.",
    )
    parser.add_argument(
        "city",
        nargs="?",
        default=None,
        help="City name to search for (exact, case-sensitive).",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_search(path: str | None, city: str, *, quiet: bool) -> int:
    """Run a single city lookup and print one line per match.

    Under *quiet*, a not-found result exits non-zero without a message;
    every other error propagates to the error boundary.
    """
    from city_pop.api import search

    try:
        matches = search(path, city)
    except CityNotFoundError:
        if quiet:
            return exit_codes.GENERAL_ERROR
        raise

    for count in matches:
        echo(str(count))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the city-pop CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.city is None:
        parser.print_help()
        return exit_codes.SUCCESS

    return _handle_search(args.file, args.city, quiet=args.quiet)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CityPopError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape_markup(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape_markup(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
