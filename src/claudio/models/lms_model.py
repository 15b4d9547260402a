"""Schema for one entry of `lms ls --llm --json`."""

from pydantic import BaseModel, ConfigDict, Field


class LmsModel(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_key: str | None = Field(default=None, alias="modelKey")
