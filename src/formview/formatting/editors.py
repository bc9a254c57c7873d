"""Property editors: per-type (and optionally per-property) value-to-text converters."""

from collections.abc import Callable
from datetime import date, datetime
from enum import Enum
from typing import Any, Protocol

from babel import Locale
from babel.dates import format_date, format_datetime


class PropertyEditor(Protocol):
    """Converts one value to display text."""

    def set_value(self, value: Any) -> None: ...

    def as_text(self) -> str: ...


EditorFactory = Callable[[], PropertyEditor]


class BasePropertyEditor:
    """Holds the value; subclasses override ``as_text``."""

    def __init__(self) -> None:
        self.value: Any = None

    def set_value(self, value: Any) -> None:
        self.value = value

    def as_text(self) -> str:
        return "" if self.value is None else str(self.value)


class DateEditor(BasePropertyEditor):
    """Formats dates and datetimes with a CLDR pattern ("yyyy-MM-dd", "medium", ...)."""

    def __init__(self, pattern: str = "yyyy-MM-dd", locale: Locale | str = "en"):
        super().__init__()
        self.pattern = pattern
        self.locale = locale

    def as_text(self) -> str:
        if self.value is None:
            return ""
        if isinstance(self.value, datetime):
            return format_datetime(self.value, self.pattern, locale=self.locale)
        if isinstance(self.value, date):
            return format_date(self.value, self.pattern, locale=self.locale)
        return str(self.value)


class EnumEditor(BasePropertyEditor):
    """Renders enum members by value, or through an explicit label mapping."""

    def __init__(self, labels: dict[Any, str] | None = None):
        super().__init__()
        self.labels = labels or {}

    def as_text(self) -> str:
        if self.value is None:
            return ""
        if self.value in self.labels:
            return self.labels[self.value]
        if isinstance(self.value, Enum):
            return str(self.value.value)
        return str(self.value)


class PropertyEditorRegistry:
    """Registry of editor factories keyed by value type and optional property path.

    Lookup order for ``find_editor(type, path)``: a registration for the exact
    path on the type or any of its base classes, then a type-wide registration
    on the type or its bases.

    Example:
        editors = PropertyEditorRegistry()
        editors.register(date, lambda: DateEditor("dd.MM.yyyy"))
        editors.register(date, lambda: DateEditor("yyyy"), field_path="published")
    """

    def __init__(self) -> None:
        self._factories: dict[tuple[type, str | None], EditorFactory] = {}

    def register(
        self,
        value_type: type,
        factory: EditorFactory,
        field_path: str | None = None,
    ) -> None:
        self._factories[(value_type, field_path)] = factory

    def find_editor(self, value_type: type, field_path: str | None = None) -> PropertyEditor | None:
        """Return a fresh editor instance, or None if nothing is registered."""
        mro = getattr(value_type, "__mro__", (value_type,))
        if field_path is not None:
            for klass in mro:
                factory = self._factories.get((klass, field_path))
                if factory is not None:
                    return factory()
        for klass in mro:
            factory = self._factories.get((klass, None))
            if factory is not None:
                return factory()
        return None
