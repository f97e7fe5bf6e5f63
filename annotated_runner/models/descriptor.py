"""Models for discovered test methods and the cases they expand into."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from pydantic import Field, field_validator

from annotated_runner.models.base import Model


class ParamKind(StrEnum):
    """Declared kind of a test method's parameter, used to coerce literals."""

    TEXT = "text"
    INT32 = "int32"
    FLOAT64 = "float64"
    FLOAT32 = "float32"
    INT64 = "int64"
    BOOLEAN = "boolean"
    CHAR = "char"
    OTHER = "other"


class TestMarker(Model):
    """Metadata attached to a method by the ``marked_test`` decorator."""

    __test__ = False

    params: Sequence[str] = Field(
        default_factory=list,
        description="Parameter literals, one invocation each (empty means one call)",
    )
    expected_results: Sequence[str] = Field(
        default_factory=list,
        description="Expected result literals, matched to params by index",
    )
    tolerance: float = Field(
        default=0.0, ge=0.0, description="Allowed absolute numeric difference"
    )
    kind: ParamKind | None = Field(
        default=None,
        description="Explicit parameter kind (None derives it from the annotation)",
    )

    @field_validator("params", "expected_results")
    @classmethod
    def as_list(cls, value: Sequence[str]) -> list[str]:
        return list(value)


class TestCase(Model):
    """Single invocation of a test method with one parameter/expected pair."""

    __test__ = False

    index: int = Field(..., ge=0, description="Position within the descriptor")
    param: str | None = Field(default=None, description="Parameter literal, if any")
    expected: str | None = Field(
        default=None, description="Expected result literal (None accepts anything)"
    )


@dataclass(frozen=True, kw_only=True)
class TestDescriptor:
    """A discovered test method bound to the subject instance."""

    __test__ = False

    name: str
    method: Callable[..., Any] = field(repr=False, compare=False)
    marker: TestMarker
    param_kind: ParamKind = ParamKind.OTHER
    accepts_param: bool = False

    @property
    def case_count(self) -> int:
        """Number of invocations; a method without params still runs once."""
        return max(1, len(self.marker.params))

    def to_cases(self) -> Sequence[TestCase]:
        """Expand the descriptor into its cases, in parameter order.

        Expected results may be shorter than the parameters; cases beyond the
        last expected literal carry no expectation.
        """
        params = self.marker.params
        expected_results = self.marker.expected_results

        cases: list[TestCase] = []
        for index in range(self.case_count):
            cases.append(
                TestCase(
                    index=index,
                    param=params[index] if index < len(params) else None,
                    expected=(
                        expected_results[index]
                        if index < len(expected_results)
                        else None
                    ),
                )
            )
        return cases
