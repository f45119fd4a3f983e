"""Tests for the CLI layer (cli/app.py).

``main`` is exercised with explicit argv lists; ``cli`` is exercised
with a patched ``sys.argv`` and asserted through ``SystemExit`` codes.
Output assertions use short substrings since Rich may wrap long lines.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path

import pytest

from city_pop.cli import exit_codes
from city_pop.cli.app import cli, main
from city_pop.exceptions import CityNotFoundError, RowDecodeError, SourceIOError

HEADER = "Country,City,AccentCity,Region,Population,Latitude,Longitude"


def _run_cli(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    monkeypatch.setattr("sys.argv", ["city-pop", *args])
    with pytest.raises(SystemExit) as exc_info:
        cli()
    code = exc_info.value.code
    assert isinstance(code, int)
    return code


# ---------------------------------------------------------------------------
# main — output
# ---------------------------------------------------------------------------

class TestMainOutput:
    def test_prints_one_line_per_match(
        self, springfield_csv: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main(["-f", str(springfield_csv), "springfield"])
        assert code == exit_codes.SUCCESS
        out = capsys.readouterr().out
        assert out.splitlines() == [
            "springfield, us: 1000",
            "springfield, us: 2000",
        ]

    def test_long_file_flag(
        self, springfield_csv: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main(["--file", str(springfield_csv), "springfield"])
        assert code == exit_codes.SUCCESS
        assert "springfield, us: 1000" in capsys.readouterr().out

    def test_reads_stdin_by_default(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(f"{HEADER}\nus,a,A,XX,5,,\n"))
        code = main(["a"])
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out.splitlines() == ["a, us: 5"]

    def test_markup_like_names_printed_verbatim(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(f"{HEADER}\nus,[b]x,X,XX,5,,\n"))
        main(["[b]x"])
        assert capsys.readouterr().out.splitlines() == ["[b]x, us: 5"]

    def test_tab_in_city_printed_verbatim(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO(f'{HEADER}\nus,"a\tb",A,XX,5,,\n'))
        code = main(["a\tb"])
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out == "a\tb, us: 5\n"


# ---------------------------------------------------------------------------
# main — errors
# ---------------------------------------------------------------------------

class TestMainErrors:
    def test_not_found_raises(self, springfield_csv: Path) -> None:
        with pytest.raises(CityNotFoundError):
            main(["-f", str(springfield_csv), "boston"])

    def test_not_found_quiet_returns_error_silently(
        self, springfield_csv: Path, capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = main(["-q", "-f", str(springfield_csv), "boston"])
        assert code == exit_codes.GENERAL_ERROR
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_quiet_does_not_hide_io_errors(self, tmp_path: Path) -> None:
        with pytest.raises(SourceIOError):
            main(["--quiet", "-f", str(tmp_path / "missing.csv"), "x"])

    def test_quiet_does_not_hide_decode_errors(
        self, write_csv: Callable[..., Path],
    ) -> None:
        path = write_csv(f"{HEADER}\nus,a,A,XX,bad,,\n")
        with pytest.raises(RowDecodeError):
            main(["-q", "-f", str(path), "a"])


# ---------------------------------------------------------------------------
# main — routing
# ---------------------------------------------------------------------------

class TestMainRouting:
    def test_no_city_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "usage: city-pop" in capsys.readouterr().out

    def test_help_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["-h"])
        assert exc_info.value.code == 0

    def test_quiet_help_describes_not_found_only(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        with pytest.raises(SystemExit):
            main(["-h"])
        help_text = " ".join(capsys.readouterr().out.split())
        assert "Exit non-zero without a message when no match is found." in help_text

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_routes_to_search(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from city_pop.cli import app as app_module

        calls: list[tuple[str | None, str, bool]] = []

        def _fake(path: str | None, city: str, *, quiet: bool) -> int:
            calls.append((path, city, quiet))
            return exit_codes.SUCCESS

        monkeypatch.setattr(app_module, "_handle_search", _fake)
        assert main(["-q", "-f", "data.csv", "boston"]) == exit_codes.SUCCESS
        assert calls == [("data.csv", "boston", True)]


# ---------------------------------------------------------------------------
# cli — error boundary
# ---------------------------------------------------------------------------

class TestCliBoundary:
    def test_success_exit_zero(
        self, springfield_csv: Path, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        code = _run_cli(monkeypatch, "-f", str(springfield_csv), "springfield")
        assert code == exit_codes.SUCCESS

    def test_not_found_reports_error(
        self,
        springfield_csv: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = _run_cli(monkeypatch, "-f", str(springfield_csv), "boston")
        assert code == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Error:" in err
        assert "No matching cities" in err
        assert "Hint:" in err

    def test_not_found_quiet_is_silent(
        self,
        springfield_csv: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = _run_cli(monkeypatch, "-q", "-f", str(springfield_csv), "boston")
        assert code == exit_codes.GENERAL_ERROR
        assert capsys.readouterr().err == ""

    def test_missing_file_reports_io_error(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = _run_cli(monkeypatch, "-f", str(tmp_path / "missing.csv"), "x")
        assert code == exit_codes.GENERAL_ERROR
        assert "Cannot open" in capsys.readouterr().err

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from city_pop.cli import app as app_module

        def _interrupt(argv: list[str] | None = None) -> int:
            raise KeyboardInterrupt

        monkeypatch.setattr(app_module, "main", _interrupt)
        assert _run_cli(monkeypatch) == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from city_pop.cli import app as app_module

        def _boom(argv: list[str] | None = None) -> int:
            raise RuntimeError("boom")

        monkeypatch.setattr(app_module, "main", _boom)
        assert _run_cli(monkeypatch) == exit_codes.UNEXPECTED_ERROR
        assert "Unexpected error" in capsys.readouterr().err

    @pytest.mark.parametrize("city", ["[/x]", "[red]x", "[bold]"])
    def test_markup_like_city_reported_literally(
        self,
        city: str,
        springfield_csv: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = _run_cli(monkeypatch, "-f", str(springfield_csv), city)
        assert code == exit_codes.GENERAL_ERROR
        assert f"'{city}'" in capsys.readouterr().err

    def test_markup_like_field_value_reported_literally(
        self,
        write_csv: Callable[..., Path],
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        path = write_csv(f"{HEADER}\nus,a,A,XX,[/b]oops,,\n")
        code = _run_cli(monkeypatch, "-f", str(path), "a")
        assert code == exit_codes.GENERAL_ERROR
        assert "'[/b]oops'" in capsys.readouterr().err
