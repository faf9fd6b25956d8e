"""Module entry stories ensuring ``python -m`` mirrors the CLI."""

from __future__ import annotations

import runpy
import subprocess
import sys
from collections.abc import Callable

import lib_cli_exit_tools
import pytest

from sorani_calendar import __init__conf__, entry
from sorani_calendar.adapters import cli as cli_mod


def _explode() -> None:
    raise RuntimeError("I should fail")


@pytest.mark.os_agnostic
def test_module_entry_executes_cli_and_shows_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """python -m invocation with no args shows help and exits 0."""
    monkeypatch.setattr(sys, "argv", ["sorani-calendar"], raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("sorani_calendar.__main__", run_name="__main__")

    captured = capsys.readouterr()
    assert exc.value.code == 0
    assert "Usage:" in captured.out
    assert __init__conf__.shell_command in captured.out


@pytest.mark.os_agnostic
def test_module_entry_formats_exceptions_via_exit_helpers(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    """Exceptions during module entry are formatted by lib_cli_exit_tools."""
    monkeypatch.setattr(sys, "argv", ["sorani-calendar", "info"], raising=False)
    monkeypatch.setattr(__init__conf__, "print_info", _explode)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("sorani_calendar.__main__", run_name="__main__")

    plain_err = strip_ansi(capsys.readouterr().err)
    assert exc.value.code != 0
    assert "RuntimeError" in plain_err or "I should fail" in plain_err


@pytest.mark.os_agnostic
def test_module_entry_cli_exports_all_registered_commands() -> None:
    """CLI facade exports all registered commands."""
    expected_commands = {
        "cli_config",
        "cli_convert",
        "cli_day_names",
        "cli_info",
        "cli_leap_year",
        "cli_month_names",
        "cli_today",
    }
    exported = {name for name in dir(cli_mod) if name.startswith("cli_")}
    assert expected_commands.issubset(exported)


@pytest.mark.os_agnostic
def test_module_entry_subprocess_converts_a_date() -> None:
    """`python -m sorani_calendar convert` works end to end in a fresh interpreter."""
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "sorani_calendar", "convert", "2024-10-19", "--style", "short"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert result.stdout.strip() == "28/7/2724"


@pytest.mark.os_agnostic
def test_module_entry_subprocess_version() -> None:
    result = subprocess.run(  # noqa: S603
        [sys.executable, "-m", "sorani_calendar", "--version"],
        capture_output=True,
        timeout=30,
        check=False,
        encoding="utf-8",
        errors="replace",
    )
    assert result.returncode == 0
    assert __init__conf__.version in result.stdout


@pytest.mark.os_agnostic
def test_entry_main_invokes_cli_with_help(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """entry.main() wires production services and invokes the CLI."""
    monkeypatch.setattr(sys, "argv", ["sorani-calendar", "--help"])

    exit_code = entry.main()

    captured = capsys.readouterr()
    assert exit_code == 0
    assert "Usage:" in captured.out
    assert __init__conf__.shell_command in captured.out
