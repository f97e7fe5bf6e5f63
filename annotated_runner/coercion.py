"""Conversion of parameter literals into typed method arguments."""

import inspect
import math
import re
import struct
import types
import typing
from collections.abc import Callable, Mapping
from types import NoneType
from typing import Annotated, Any

from annotated_runner.models.descriptor import ParamKind

Int32 = Annotated[int, ParamKind.INT32]
Int64 = Annotated[int, ParamKind.INT64]
Float32 = Annotated[float, ParamKind.FLOAT32]
Char = Annotated[str, ParamKind.CHAR]

INT32_RANGE = (-(2**31), 2**31 - 1)
INT64_RANGE = (-(2**63), 2**63 - 1)
NUL_CHAR = "\0"

_INTEGER_LITERAL = re.compile(r"[+-]?[0-9]+")

ANNOTATION_KINDS: Mapping[Any, ParamKind] = {
    str: ParamKind.TEXT,
    int: ParamKind.INT64,
    float: ParamKind.FLOAT64,
    bool: ParamKind.BOOLEAN,
}


class CoercionError(ValueError):
    """Raised when a literal cannot be converted to the parameter's kind."""


def coerce(literal: str, kind: ParamKind) -> Any:
    """Convert a parameter literal to a value of the given kind.

    Kinds without a conversion rule pass the literal through unchanged.

    Raises:
        CoercionError: If the literal is not a valid value of the kind

    """
    converter = _CONVERTERS.get(kind)
    if converter is None:
        return literal
    return converter(literal)


def _parse_integer(literal: str, bounds: tuple[int, int], kind: ParamKind) -> int:
    if not _INTEGER_LITERAL.fullmatch(literal):
        raise CoercionError(f"invalid {kind} literal: {literal!r}")

    value = int(literal, 10)
    low, high = bounds
    if not low <= value <= high:
        raise CoercionError(f"{kind} literal out of range: {literal!r}")
    return value


def _parse_float(literal: str) -> float:
    try:
        return float(literal)
    except ValueError:
        raise CoercionError(f"invalid float literal: {literal!r}") from None


class Float32Value(float):
    """A single precision value that prints its shortest round-tripping text."""

    def __str__(self) -> str:
        if not math.isfinite(self):
            return float.__repr__(self)
        for precision in range(1, 10):
            text = f"{float(self):.{precision}g}"
            if _to_single(float(text)) == float(self):
                return repr(float(text))
        return float.__repr__(self)

    __repr__ = __str__


def _to_single(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _narrow_float(literal: str) -> Float32Value:
    return Float32Value(_to_single(_parse_float(literal)))


_CONVERTERS: Mapping[ParamKind, Callable[[str], Any]] = {
    ParamKind.TEXT: lambda literal: literal,
    ParamKind.INT32: lambda literal: _parse_integer(
        literal, INT32_RANGE, ParamKind.INT32
    ),
    ParamKind.INT64: lambda literal: _parse_integer(
        literal, INT64_RANGE, ParamKind.INT64
    ),
    ParamKind.FLOAT64: _parse_float,
    ParamKind.FLOAT32: _narrow_float,
    ParamKind.BOOLEAN: lambda literal: literal.lower() == "true",
    ParamKind.CHAR: lambda literal: literal[:1] or NUL_CHAR,
}


def first_parameter(method: Callable[..., Any]) -> inspect.Parameter | None:
    """Return the first positional parameter of a (bound) method, if any."""
    try:
        signature = inspect.signature(method)
    except (TypeError, ValueError):
        return None

    for parameter in signature.parameters.values():
        if parameter.kind in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            inspect.Parameter.VAR_POSITIONAL,
        ):
            return parameter
    return None


def kind_for_annotation(annotation: Any) -> ParamKind:
    """Map a parameter annotation to its kind.

    ``Annotated`` aliases carrying a ``ParamKind`` (``Int32``, ``Float32``,
    ``Char``...) select that kind; ``X | None`` maps like ``X``; plain
    builtins map through ``ANNOTATION_KINDS``; anything else is
    ``ParamKind.OTHER``.
    """
    if typing.get_origin(annotation) in (typing.Union, types.UnionType):
        members = [arg for arg in typing.get_args(annotation) if arg is not NoneType]
        if len(members) == 1:
            return kind_for_annotation(members[0])

    if typing.get_origin(annotation) is Annotated:
        for extra in annotation.__metadata__:
            if isinstance(extra, ParamKind):
                return extra
        annotation = typing.get_args(annotation)[0]

    return ANNOTATION_KINDS.get(annotation, ParamKind.OTHER)


def resolve_param_kind(
    method: Callable[..., Any], explicit: ParamKind | None = None
) -> ParamKind:
    """Determine the kind used to coerce the method's first parameter."""
    if explicit is not None:
        return explicit

    parameter = first_parameter(method)
    if parameter is None:
        return ParamKind.OTHER

    try:
        hints = typing.get_type_hints(
            getattr(method, "__func__", method), include_extras=True
        )
    except (NameError, TypeError):
        hints = {}

    annotation = hints.get(parameter.name, parameter.annotation)
    if annotation is inspect.Parameter.empty:
        return ParamKind.OTHER
    return kind_for_annotation(annotation)
