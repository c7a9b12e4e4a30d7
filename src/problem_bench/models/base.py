"""Base Pydantic schema shared by the configuration models."""

from pydantic import BaseModel, ConfigDict

__all__ = ["BaseSchema"]


class BaseSchema(BaseModel):
    """Base model for all configuration schemas.

    Strings are stripped before validation, so a blank name reaches the
    validators as an empty string. Unknown fields are rejected so that a
    misspelled option fails instead of being silently dropped.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        extra="forbid",
    )
