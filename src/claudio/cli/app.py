"""Top-level launcher flow."""

import logging
import sys

from claudio.args import route_session, scan_args, stdin_stdout_are_tty
from claudio.cli.shared import configure_logging, supports_color
from claudio.config import ensure_env_defaults, load_config
from claudio.delegate import exec_target
from claudio.errors import LauncherError, NoModelSelectedError, NonInteractiveModelError
from claudio.inventory import list_models
from claudio.models import LauncherConfig, SessionRoute

log = logging.getLogger("claudio")


def resolve_model(config: LauncherConfig) -> str:
    """Ask LM Studio for its models and let the user pick one."""
    # termios is POSIX-only, so the picker is imported on demand.
    from claudio.picker import pick_model

    models = list_models(config.inventory_program)
    selected = pick_model(models, color=supports_color())
    if selected is None:
        raise NoModelSelectedError()
    return selected


def run(args: list[str], config: LauncherConfig) -> int:
    """Route the invocation and hand off to the target program."""
    scan = scan_args(args)
    route = route_session(scan, interactive=stdin_stdout_are_tty())
    log.debug("route=%s", route.value)

    if route is SessionRoute.NON_INTERACTIVE:
        raise NonInteractiveModelError()
    model = resolve_model(config) if route is SessionRoute.RESOLVE_MODEL else None
    return exec_target(args, model, program=config.target_program)


def main(argv: list[str] | None = None) -> int:
    """Launch claude with LM Studio defaults; returns the exit status."""
    ensure_env_defaults()
    config = load_config()
    configure_logging(config.debug)

    args = list(sys.argv[1:] if argv is None else argv)
    try:
        return run(args, config)
    except LauncherError as e:
        print(e, file=sys.stderr)
        return e.exit_code


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
