"""Subject access and request context shared by all tags."""

from formview.core.access import (
    FieldAccessible,
    ObjectFieldAccessor,
    errors_of,
    exposes_errors,
    field_accessor,
    get_path,
)
from formview.core.context import (
    UNSET,
    AttributeScanner,
    MappingAttributeScanner,
    RequestContext,
    is_set,
    to_locale,
)

__all__ = [
    "UNSET",
    "AttributeScanner",
    "FieldAccessible",
    "MappingAttributeScanner",
    "ObjectFieldAccessor",
    "RequestContext",
    "errors_of",
    "exposes_errors",
    "field_accessor",
    "get_path",
    "is_set",
    "to_locale",
]
