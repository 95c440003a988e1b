"""Process-level entry: run the command group and return an exit code.

Contents:
    * :func:`main` - Used by the console script and ``python -m monthname``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from monthname import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import apply_traceback_preferences, restore_traceback_state, snapshot_traceback_state

if TYPE_CHECKING:
    from monthname.composition import AppServices


def _report_crash(exc: BaseException) -> int:
    """Print *exc* through lib_cli_exit_tools and return its exit code.

    The message is truncated unless ``--traceback`` was given.
    """
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _invoke(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    # lib_cli_exit_tools.run_cli cannot pass ``obj``; Click is driven directly.
    from .root import cli

    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        # Commands exit with an ExitCode after printing their own message.
        if isinstance(exc.code, int):
            return exc.code
        return _report_crash(exc)
    except BaseException as exc:  # noqa: BLE001
        return _report_crash(exc)
    return 0


def _shutdown_logging() -> None:
    # A worker thread must not tear down logging for the rest of the process.
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI and return its exit code.

    Args:
        argv: Arguments without the program name. ``None`` reads ``sys.argv``.
        restore_traceback: Put the traceback flags back afterwards.
        services_factory: Returns the AppServices to run with, normally
            ``build_production``.

    Raises:
        ValueError: If ``services_factory`` is missing.

    Example:
        >>> from monthname.composition import build_production
        >>> main(["hello"], services_factory=build_production)  # doctest: +SKIP
        Hello World
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = list(argv) if argv is not None else sys.argv[1:]
    previous = snapshot_traceback_state()
    try:
        return _invoke(args, services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(previous)
        _shutdown_logging()


__all__ = ["main"]
