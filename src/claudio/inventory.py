"""List the LLMs LM Studio has available locally."""

import logging
import subprocess

from pydantic import TypeAdapter, ValidationError

from claudio.constants import DEFAULT_INVENTORY_PROGRAM, INVENTORY_ARGS
from claudio.errors import MissingDependencyError, NoModelsFoundError
from claudio.models import LmsModel

log = logging.getLogger(__name__)

_MODEL_LIST = TypeAdapter(list[LmsModel])


def parse_model_keys(payload: bytes | str) -> list[str]:
    """Return the non-blank `modelKey` values from `lms ls --json` output.

    Raises ValidationError when the payload is not a JSON list of objects
    whose `modelKey` (if any) is a string or null.
    """
    models = _MODEL_LIST.validate_json(payload)
    keys: list[str] = []
    for model in models:
        if model.model_key is not None and model.model_key.strip():
            keys.append(model.model_key)
    return keys


def list_models(program: str = DEFAULT_INVENTORY_PROGRAM) -> list[str]:
    """Run `lms ls --llm --json` and return candidate model keys in order."""
    command = [program, *INVENTORY_ARGS]
    log.debug("inventory command: %s", command)
    try:
        result = subprocess.run(command, capture_output=True)
    except OSError as e:
        log.debug("%s failed to start: %s", program, e)
        raise MissingDependencyError(program) from e

    if result.returncode != 0:
        log.debug("%s exited with %d: %r", program, result.returncode, result.stderr)
        raise NoModelsFoundError(program)

    try:
        keys = parse_model_keys(result.stdout)
    except ValidationError as e:
        log.debug("unexpected %s output: %s", program, e)
        raise NoModelsFoundError(program) from e

    log.debug("found %d models", len(keys))
    if not keys:
        raise NoModelsFoundError(program)
    return keys
