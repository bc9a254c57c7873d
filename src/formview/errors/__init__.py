"""Validation error containers and message-resolvable types."""

from formview.errors.types import (
    DefaultMessageResolvable,
    Errors,
    FieldError,
    MessageResolvable,
    ObjectError,
)

__all__ = [
    "DefaultMessageResolvable",
    "Errors",
    "FieldError",
    "MessageResolvable",
    "ObjectError",
]
