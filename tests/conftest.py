"""Shared pytest fixtures for calendar, configuration, and CLI tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields
from datetime import date
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import lib_log_rich.runtime
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from sorani_calendar.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

#: Newroz 2024; converts to 2 Xakelêwe 2724.
NEWROZ_2024 = date(2024, 3, 21)

#: Console threshold injected into CLI test configs unless the test sets one.
TEST_CONSOLE_LEVEL = "WARNING"


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


def _with_quiet_console(config: Config) -> Config:
    """Return ``config`` with ``lib_log_rich.console_level`` defaulted to WARNING.

    An explicit level in the test data wins.
    """
    data = dict(config.as_dict())
    logging_section = dict(data.get("lib_log_rich") or {})
    logging_section.setdefault("console_level", TEST_CONSOLE_LEVEL)
    data["lib_log_rich"] = logging_section
    return Config(data, {})


def _shutdown_logging() -> None:
    """Tear down the lib_log_rich runtime so the next test initializes its own."""
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def _services_with(config: Config, *, today: date, get_config: Callable[..., Config] | None = None) -> AppServices:
    """Production services with the config loader and clock replaced.

    The injected config is routed through :func:`_with_quiet_console` so
    INFO records from command handlers stay off the test console.
    """
    from sorani_calendar.adapters.memory import FrozenClock
    from sorani_calendar.composition import AppServices, build_production

    config = _with_quiet_console(config)

    def _fake_get_config(**_kwargs: Any) -> Config:
        return config

    prod = build_production()
    return AppServices(
        get_config=get_config or _fake_get_config,
        get_default_config_path=prod.get_default_config_path,
        display_config=prod.display_config,
        init_logging=prod.init_logging,
        today=FrozenClock(today),
        parse_date=prod.parse_date,
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` for exact output (e.g., JSON parsing) so log
    records written to stderr cannot contaminate it.

    Example:
        def test_help(cli_runner: CliRunner) -> None:
            result = cli_runner.invoke(cli, ["--help"])
            assert result.exit_code == 0
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests.

    Use this when invoking CLI commands that don't need custom injection.

    Example:
        def test_info(cli_runner: CliRunner, production_factory: Callable[[], AppServices]) -> None:
            result = cli_runner.invoke(cli, ["info"], obj=production_factory)
            assert result.exit_code == 0
    """
    from sorani_calendar.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string.

    Example:
        def test_output(cli_runner: CliRunner, strip_ansi: Callable[[str], str]) -> None:
            result = cli_runner.invoke(cli, ["info"])
            assert "version" in strip_ansi(result.output)
    """

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test.

    Only clears before, not after, so a test that monkeypatches the loader
    (losing ``cache_clear``) does not break teardown.
    """
    from sorani_calendar.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts.

    Builds actual ``lib_layered_config.Config`` objects without filesystem I/O.
    The second argument (empty dict) represents no source provenance info.

    Example:
        def test_style(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"sorani_calendar": {"default_style": "short"}})
            assert config.get("sorani_calendar.default_style") == "short"
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def calendar_cli_context(
    clear_config_cache: None,
) -> Iterator[Callable[..., Callable[[], AppServices]]]:
    """Create a CLI services factory with injected config and a frozen clock.

    Only the I/O boundaries are replaced: the config loader returns the
    given data and ``today`` reports a fixed date (Newroz 2024 by default).
    Logging, display, and parsing stay production-wired. The console
    log level defaults to WARNING and the logging runtime is shut down
    after the test.

    Example:
        def test_short(cli_runner: CliRunner, calendar_cli_context) -> None:
            factory = calendar_cli_context({"sorani_calendar": {"default_style": "short"}})
            result = cli_runner.invoke(cli, ["today"], obj=factory)
            assert result.stdout.strip() == "2/1/2724"
    """

    def _create(config_data: dict[str, Any] | None = None, *, today: date = NEWROZ_2024) -> Callable[[], AppServices]:
        services = _services_with(Config(config_data or {}, {}), today=today)
        return lambda: services

    yield _create
    _shutdown_logging()


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Iterator[Callable[[Config, list[str | None]], Callable[[], AppServices]]]:
    """Return a factory that records the profile passed to get_config.

    Example:
        def test_profile_passed(cli_runner, config_factory, inject_config_with_profile_capture) -> None:
            captured: list[str | None] = []
            factory = inject_config_with_profile_capture(config_factory({}), captured)
            cli_runner.invoke(cli, ["--profile", "staging", "info"], obj=factory)
            assert captured == ["staging"]
    """

    def _inject(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        config = _with_quiet_console(config)

        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        services = _services_with(config, today=NEWROZ_2024, get_config=_capturing_get_config)
        return lambda: services

    yield _inject
    _shutdown_logging()
