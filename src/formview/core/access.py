"""Property access on arbitrary subject objects.

Beans reach the rendering layer as plain objects, dataclasses, pydantic models
or mappings. Everything that needs to read a property goes through a
``FieldAccessible`` so the tag code never introspects subjects directly.

Dotted paths ("author.name") are walked one segment at a time. A segment that
does not exist yields None and the walk stops there.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from formview.errors.types import Errors


@runtime_checkable
class FieldAccessible(Protocol):
    """Capability interface for reading (possibly nested) properties."""

    def get_field(self, path: str) -> Any | None:
        """Return the value at the dotted path, or None if any segment is missing."""
        ...


class ObjectFieldAccessor:
    """Adapter that reads mapping keys or attributes, segment by segment."""

    def __init__(self, subject: Any):
        self.subject = subject

    def get_field(self, path: str) -> Any | None:
        value = self.subject
        for part in path.split("."):
            if value is None:
                return None
            value = self._read_segment(value, part)
        return value

    def has_field(self, name: str) -> bool:
        """Check whether the subject exposes a top-level property with this name."""
        if isinstance(self.subject, Mapping):
            return name in self.subject
        return hasattr(self.subject, name)

    @staticmethod
    def _read_segment(value: Any, part: str) -> Any | None:
        if isinstance(value, FieldAccessible):
            return value.get_field(part)
        if isinstance(value, Mapping):
            return value.get(part)
        return getattr(value, part, None)


def field_accessor(subject: Any) -> FieldAccessible:
    """Return the subject itself if it is field-accessible, else wrap it."""
    if isinstance(subject, FieldAccessible):
        return subject
    return ObjectFieldAccessor(subject)


def get_path(subject: Any, path: str) -> Any | None:
    """Read a dotted property path from any subject."""
    if subject is None:
        return None
    return field_accessor(subject).get_field(path)


def exposes_errors(subject: Any) -> bool:
    """Check whether a subject has an ``errors`` property at all."""
    if subject is None:
        return False
    if isinstance(subject, FieldAccessible):
        return subject.get_field("errors") is not None
    return ObjectFieldAccessor(subject).has_field("errors")


def errors_of(subject: Any) -> Errors | None:
    """Return the error container of a subject.

    The subject may be an ``Errors`` instance itself or expose one through an
    ``errors`` property. Anything else yields None.
    """
    if isinstance(subject, Errors):
        return subject
    value = get_path(subject, "errors")
    if isinstance(value, Errors):
        return value
    return None
