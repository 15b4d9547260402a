"""Launcher errors and their exit statuses."""

from claudio.constants import EXIT_FAILURE, EXIT_NEEDS_MODEL, PROG


class LauncherError(RuntimeError):
    """A fatal launcher error reported as a single prefixed line on stderr."""

    exit_code = EXIT_FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(f"{PROG}: {message}")


class MissingDependencyError(LauncherError):
    def __init__(self, program: str) -> None:
        super().__init__(f"missing dependency: {program}")
        self.program = program


class NoModelsFoundError(LauncherError):
    def __init__(self, program: str) -> None:
        super().__init__(f"no models found (try: {program} ls --llm)")


class NoModelSelectedError(LauncherError):
    def __init__(self) -> None:
        super().__init__("no model selected")


class LaunchError(LauncherError):
    def __init__(self, program: str) -> None:
        super().__init__(f"failed to exec {program}")
        self.program = program


class NonInteractiveModelError(LauncherError):
    """A model is required but nobody is at a terminal to pick one."""

    exit_code = EXIT_NEEDS_MODEL

    def __init__(self) -> None:
        super().__init__(
            "no --model provided and non-interactive mode detected; "
            "please pass --model <modelKey>."
        )
