"""Common configuration for engine models: immutable, strict, camelCase on the wire."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class EngineModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


def require_text(value: str, what: str) -> str:
    """Strip surrounding whitespace and reject blank strings."""
    value = value.strip()
    if not value:
        raise ValueError(f"{what} must not be empty")
    return value
