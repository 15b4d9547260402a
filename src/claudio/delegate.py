"""Hand the terminal over to claude."""

import logging
import os
import subprocess

from claudio.constants import DEFAULT_TARGET_PROGRAM, FALLBACK_EXIT_CODE, MODEL_FLAG
from claudio.errors import LaunchError, MissingDependencyError

log = logging.getLogger(__name__)


def build_argv(program: str, args: list[str], model: str | None = None) -> list[str]:
    """Return the target argv: original args untouched, plus `--model` if picked."""
    argv = [program, *args]
    if model is not None:
        argv.extend([MODEL_FLAG, model])
    return argv


def _can_replace_process() -> bool:
    return os.name == "posix"


def exec_target(
    args: list[str],
    model: str | None = None,
    program: str = DEFAULT_TARGET_PROGRAM,
) -> int:
    """Replace this process with the target program.

    Only returns where exec is unavailable; the child's exit status is
    returned then.
    """
    argv = build_argv(program, args, model)
    log.debug("exec: %s", argv)
    try:
        if _can_replace_process():
            os.execvp(program, argv)
        result = subprocess.run(argv)
    except FileNotFoundError as e:
        raise MissingDependencyError(program) from e
    except OSError as e:
        log.debug("exec %s failed: %s", program, e)
        raise LaunchError(program) from e

    if result.returncode < 0:
        # Killed by a signal: no exit code to forward.
        return FALLBACK_EXIT_CODE
    return result.returncode
