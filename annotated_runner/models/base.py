"""Base model configuration for marker metadata and test cases."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base model with frozen, strict-field configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")
