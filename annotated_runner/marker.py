"""The ``marked_test`` decorator that registers methods as tests."""

from collections.abc import Callable, Sequence
from typing import Any, overload

from annotated_runner.models.descriptor import ParamKind, TestMarker

MARKER_ATTRIBUTE = "__annotated_runner_marker__"

Method = Callable[..., Any]


@overload
def marked_test(method: Method, /) -> Method: ...


@overload
def marked_test(
    *,
    params: Sequence[str] = (),
    expected_results: Sequence[str] = (),
    tolerance: float = 0.0,
    kind: ParamKind | None = None,
) -> Callable[[Method], Method]: ...


def marked_test(
    method: Method | None = None,
    /,
    *,
    params: Sequence[str] = (),
    expected_results: Sequence[str] = (),
    tolerance: float = 0.0,
    kind: ParamKind | None = None,
) -> Method | Callable[[Method], Method]:
    """Mark a method as a test, optionally with parameters and expectations.

    Usable bare (``@marked_test``) or with metadata::

        @marked_test(params=["5", "10"], expected_results=["25", "100"])
        def square(self, num: int) -> int:
            return num * num

    Metadata is validated immediately, so a bad tolerance fails at import.
    """
    marker = TestMarker(
        params=params,
        expected_results=expected_results,
        tolerance=tolerance,
        kind=kind,
    )

    def decorate(func: Method) -> Method:
        setattr(func, MARKER_ATTRIBUTE, marker)
        return func

    if method is not None:
        return decorate(method)
    return decorate


def get_marker(obj: Any) -> TestMarker | None:
    """Return the test marker attached to a function, if any."""
    marker = getattr(obj, MARKER_ATTRIBUTE, None)
    return marker if isinstance(marker, TestMarker) else None
