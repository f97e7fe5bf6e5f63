"""Discover marked test methods on a subject instance."""

import logging
from collections.abc import Sequence
from typing import Any

from annotated_runner.coercion import first_parameter, resolve_param_kind
from annotated_runner.marker import get_marker
from annotated_runner.models.descriptor import TestDescriptor

log = logging.getLogger(__name__)


def discover_tests(instance: Any) -> Sequence[TestDescriptor]:
    """Build descriptors for the marked methods of an instance.

    Methods are returned in class namespace order, walking the MRO from the
    most basic class. An override keeps the position of the first definition
    and replaces its marker, so an unmarked override hides an inherited test.

    Args:
        instance: Already constructed test subject

    Returns:
        Descriptors for all marked methods, possibly empty.

    """
    members: dict[str, Any] = {}
    for klass in reversed(type(instance).__mro__):
        members.update(vars(klass))

    descriptors: list[TestDescriptor] = []
    for name, attribute in members.items():
        marker = get_marker(attribute) or get_marker(
            getattr(attribute, "__func__", None)
        )
        if marker is None:
            continue

        method = getattr(instance, name)
        if not callable(method):
            log.warning("Skipping marked attribute %s: not callable", name)
            continue

        descriptors.append(
            TestDescriptor(
                name=name,
                method=method,
                marker=marker,
                param_kind=resolve_param_kind(method, marker.kind),
                accepts_param=first_parameter(method) is not None,
            )
        )

    log.debug(
        "Discovered %d test method(s) on %s",
        len(descriptors),
        type(instance).__qualname__,
    )
    return descriptors
