"""Value formatting and property editors."""

from formview.formatting.editors import (
    BasePropertyEditor,
    DateEditor,
    EnumEditor,
    PropertyEditor,
    PropertyEditorRegistry,
)
from formview.formatting.formatter import (
    DECIMAL_PATTERN,
    INTEGER_PATTERN,
    ValueFormatter,
    format_number,
    is_numeric,
)

__all__ = [
    "DECIMAL_PATTERN",
    "INTEGER_PATTERN",
    "BasePropertyEditor",
    "DateEditor",
    "EnumEditor",
    "PropertyEditor",
    "PropertyEditorRegistry",
    "ValueFormatter",
    "format_number",
    "is_numeric",
]
