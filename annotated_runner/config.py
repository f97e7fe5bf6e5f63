"""Configuration for a command line run."""

from typing import Literal

from pydantic import Field, field_validator

from annotated_runner.models.base import Model

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class RunConfig(Model):
    """Options of one run, built from the command line."""

    subject: str = Field(
        ..., description="Suite key or dotted path of the class under test"
    )
    log_level: LogLevel = Field(default="INFO", description="Logging level")

    @field_validator("subject")
    @classmethod
    def strip_subject(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("subject must not be blank")
        return value
