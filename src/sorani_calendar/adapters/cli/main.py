"""CLI entry point and execution wrapper.

Contents:
    * :func:`main` - Run the CLI and return an exit code.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from sorani_calendar import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)

if TYPE_CHECKING:
    from sorani_calendar.composition import AppServices


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    """Invoke the root group, translating every outcome into an exit code.

    ``lib_cli_exit_tools.run_cli`` cannot pass ``obj`` to Click, so its
    behaviour is reproduced here with the services factory as ``obj``.
    """
    from .root import cli

    args = list(argv) if argv is not None else sys.argv[1:]

    try:
        cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
        return 0
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:
        # SystemExit and KeyboardInterrupt included: lib_cli_exit_tools owns formatting and exit-code mapping.
        tracebacks_enabled = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
        apply_traceback_preferences(tracebacks_enabled)
        length_limit = TRACEBACK_VERBOSE_LIMIT if tracebacks_enabled else TRACEBACK_SUMMARY_LIMIT
        lib_cli_exit_tools.print_exception_message(trace_back=tracebacks_enabled, length_limit=length_limit)
        return lib_cli_exit_tools.get_system_exit_code(exc)


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Execute the CLI with error handling and return the exit code.

    Shared by the console script and ``python -m sorani_calendar``.

    Args:
        argv: CLI arguments; ``sys.argv[1:]`` when None.
        restore_traceback: Restore the previous traceback flags afterwards.
        services_factory: Factory returning AppServices. Required; callers
            outside the adapters layer pass ``build_production``.

    Returns:
        Exit code of the CLI run.

    Raises:
        ValueError: If services_factory is not provided.

    Example:
        >>> from sorani_calendar.composition import build_production
        >>> main(["--help"], services_factory=build_production)  # doctest: +SKIP
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    previous_state = snapshot_traceback_state()
    try:
        return _run_cli(argv, services_factory=services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(previous_state)
        # Shutting down from a worker thread would stop logging for the whole process.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
