"""Format arbitrary values for display on an HTML page."""

import numbers
from decimal import Decimal
from typing import Any

from babel import Locale
from babel.numbers import format_decimal

from formview.codecs import CodecRegistry
from formview.core.context import RequestContext, to_locale
from formview.errors.types import MessageResolvable
from formview.formatting.editors import PropertyEditorRegistry
from formview.messages.resolver import MessageAttrs, MessageResolver

INTEGER_PATTERN = "0"
# Up to six fractional digits with trailing zeros trimmed, so 3.100000 renders
# "3.1" and 2.0 renders "2". A "0.00#####" pattern would force "3.10".
DECIMAL_PATTERN = "0.######"


def is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (numbers.Real, Decimal))


def format_number(value: Any, locale: Locale) -> str:
    """Format a number with the integer or decimal pattern and locale symbols."""
    pattern = INTEGER_PATTERN if isinstance(value, numbers.Integral) else DECIMAL_PATTERN
    return format_decimal(value, format=pattern, locale=locale)


class ValueFormatter:
    """Converts values to locale-correct, optionally HTML-encoded text.

    Precedence: a registered property editor, then numeric formatting, then
    message resolution for resolvable objects, then ``str()``. Callers must
    not pass None.
    """

    def __init__(
        self,
        editors: PropertyEditorRegistry,
        resolver: MessageResolver,
        codecs: CodecRegistry,
        request: RequestContext,
    ):
        self.editors = editors
        self.resolver = resolver
        self.codecs = codecs
        self.request = request

    def format(
        self,
        value: Any,
        field_path: str | None = None,
        locale: Locale | str | None = None,
    ) -> str:
        should_encode = self.request.html_encoding

        editor = self.editors.find_editor(type(value), field_path)
        if editor is not None:
            editor.set_value(value)
            text = editor.as_text()
            if should_encode and not is_numeric(value):
                return self.codecs.encode("HTML", text)
            return text

        display: Any = value
        if is_numeric(value):
            effective = to_locale(locale) if locale else self.request.locale
            display = format_number(value, effective)  # type: ignore[arg-type]
        elif isinstance(value, MessageResolvable):
            display = self.resolver.resolve(MessageAttrs(message=value, locale=locale))

        if should_encode:
            return self.codecs.encode("HTML", str(display))
        return str(display)
