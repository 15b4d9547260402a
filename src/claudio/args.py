"""Scan claude's raw argv just enough to decide whether a model is needed.

Only `--model`, `-p/--print`, `-h/--help`, `-v/--version` and the first
positional token are understood. Every other flag is assumed to take no value,
so `--some-flag value` makes `value` look like a subcommand. claude's full
grammar is intentionally not modelled here.
"""

import logging
import sys

from claudio.constants import (
    END_OF_FLAGS,
    HELP_FLAGS,
    MODEL_FLAG,
    NON_SESSION_COMMANDS,
    PRINT_FLAGS,
)
from claudio.models import ScanResult, SessionRoute

log = logging.getLogger(__name__)


def _is_model_flag(arg: str) -> bool:
    return arg == MODEL_FLAG or arg.startswith(f"{MODEL_FLAG}=")


def scan_args(args: list[str]) -> ScanResult:
    """Classify argv (without the program name) in a single pass."""
    model_specified = False
    print_mode = False
    help_mode = False
    positional: str | None = None

    expect_model_value = False
    for arg in args:
        if expect_model_value:
            expect_model_value = False
            continue
        if _is_model_flag(arg):
            model_specified = True
            expect_model_value = arg == MODEL_FLAG
            continue
        # Unlike help/version, -p is honoured after the first positional too.
        if arg in PRINT_FLAGS:
            print_mode = True
            continue
        if arg == END_OF_FLAGS:
            continue
        if positional is not None:
            # Everything after the first positional belongs to claude.
            continue
        if arg in HELP_FLAGS:
            help_mode = True
            continue
        if arg.startswith("-"):
            continue
        positional = arg

    starts_session = not help_mode and positional not in NON_SESSION_COMMANDS
    result = ScanResult(
        model_specified=model_specified,
        print_mode=print_mode,
        starts_session=starts_session,
    )
    log.debug("scan: %s positional=%r help=%s", result, positional, help_mode)
    return result


def needs_model(scan: ScanResult) -> bool:
    """Return whether this invocation opens a session with no --model."""
    return scan.starts_session and not scan.model_specified


def route_session(scan: ScanResult, *, interactive: bool) -> SessionRoute:
    """Decide what has to happen before claude can be exec'd."""
    if not needs_model(scan):
        return SessionRoute.DELEGATE
    if scan.print_mode or not interactive:
        return SessionRoute.NON_INTERACTIVE
    return SessionRoute.RESOLVE_MODEL


def stdin_stdout_are_tty() -> bool:
    # sys.stdin/sys.stdout are None when the descriptor was closed at startup.
    if sys.stdin is None or sys.stdout is None:
        return False
    return sys.stdin.isatty() and sys.stdout.isatty()
