"""Configuration model for claudio."""

from pydantic import BaseModel

from claudio.constants import DEFAULT_INVENTORY_PROGRAM, DEFAULT_TARGET_PROGRAM


class LauncherConfig(BaseModel):
    """Runtime configuration for the launcher itself."""

    target_program: str = DEFAULT_TARGET_PROGRAM
    inventory_program: str = DEFAULT_INVENTORY_PROGRAM
    debug: bool = False
