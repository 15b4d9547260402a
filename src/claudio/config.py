"""Environment defaults and launcher configuration."""

import os
from collections.abc import MutableMapping

from claudio.constants import ENV_DEFAULTS
from claudio.models import LauncherConfig

TARGET_PROGRAM_ENV = "CLAUDIO_CLAUDE_BIN"
INVENTORY_PROGRAM_ENV = "CLAUDIO_LMS_BIN"
DEBUG_ENV = "CLAUDIO_DEBUG"
TRUTHY = {"1", "true", "yes", "on"}


def ensure_env_defaults(environ: MutableMapping[str, str] | None = None) -> None:
    """Point claude at LM Studio unless the caller already configured it.

    Unset and empty variables get the defaults; anything non-empty is kept.
    """
    env = os.environ if environ is None else environ
    for name, default in ENV_DEFAULTS.items():
        if not env.get(name):
            env[name] = default


def load_config(environ: MutableMapping[str, str] | None = None) -> LauncherConfig:
    """Build launcher settings from CLAUDIO_* environment variables."""
    env = os.environ if environ is None else environ
    overrides: dict[str, object] = {}

    target = env.get(TARGET_PROGRAM_ENV, "").strip()
    if target:
        overrides["target_program"] = target
    inventory = env.get(INVENTORY_PROGRAM_ENV, "").strip()
    if inventory:
        overrides["inventory_program"] = inventory
    overrides["debug"] = env.get(DEBUG_ENV, "").strip().lower() in TRUTHY

    return LauncherConfig(**overrides)
