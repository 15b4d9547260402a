"""Model package for claudio."""

from claudio.models.launcher_config import LauncherConfig
from claudio.models.lms_model import LmsModel
from claudio.models.scan_result import ScanResult, SessionRoute

__all__ = [
    "LauncherConfig",
    "LmsModel",
    "ScanResult",
    "SessionRoute",
]
