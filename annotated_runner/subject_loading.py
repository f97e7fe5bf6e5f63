"""Resolution and construction of the test subject class."""

import importlib
import inspect
import logging
from importlib.metadata import entry_points
from typing import Any

ENTRY_POINT_GROUP = "annotated_runner.suites"

log = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when the run cannot start because the subject is unusable."""


class SubjectNotFoundError(ConfigurationError):
    """Raised when a subject identifier does not resolve to an object."""


class InstantiationError(ConfigurationError):
    """Raised when the subject is not a class or cannot be built without args."""


def load_subject_class(subject: str) -> Any:
    """Resolve a subject identifier to the object it names.

    Args:
        subject: Either a suite key registered in the ``annotated_runner.suites``
            entry point group, ``package.module:ClassName`` or
            ``package.module.ClassName``

    Returns:
        The resolved object (normally a class)

    Raises:
        SubjectNotFoundError: If the identifier cannot be resolved

    """
    subject = subject.strip()

    entries = entry_points(group=ENTRY_POINT_GROUP)
    for entry in entries:
        if entry.name == subject:
            log.debug("Loading suite %s from entry point %s", subject, entry.value)
            return entry.load()

    if ":" in subject:
        module_name, _, attribute_path = subject.partition(":")
    else:
        module_name, _, attribute_path = subject.rpartition(".")

    if not module_name or not attribute_path:
        available = [e.name for e in entries]
        raise SubjectNotFoundError(
            f"Subject '{subject}' is not a dotted path. "
            f"Available suites: {available}"
        )

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise SubjectNotFoundError(
            f"Cannot import module '{module_name}' for subject '{subject}': {e}"
        ) from e

    for attribute in attribute_path.split("."):
        try:
            target = getattr(target, attribute)
        except AttributeError as e:
            raise SubjectNotFoundError(
                f"Subject '{subject}' not found: '{module_name}' has no "
                f"attribute '{attribute_path}'"
            ) from e

    return target


def instantiate_subject(subject_cls: Any) -> Any:
    """Construct the subject through its no-argument constructor.

    Raises:
        InstantiationError: If the subject is not a class or construction fails

    """
    if not inspect.isclass(subject_cls):
        raise InstantiationError(f"Subject {subject_cls!r} is not a class")

    try:
        return subject_cls()
    except Exception as e:
        raise InstantiationError(
            f"Cannot instantiate {subject_cls.__qualname__}: "
            f"{type(e).__name__}: {e}"
        ) from e
