"""Argument scan and routing models."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class ScanResult:
    """What the raw argv says about the upcoming claude invocation."""

    model_specified: bool
    print_mode: bool
    starts_session: bool


class SessionRoute(Enum):
    DELEGATE = "delegate"
    RESOLVE_MODEL = "resolve-model"
    NON_INTERACTIVE = "non-interactive"
