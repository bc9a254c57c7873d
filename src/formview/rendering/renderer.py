"""Walk extracted errors and render them as an HTML list or XML."""

import logging
import re
import xml.etree.ElementTree as ET
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from babel import Locale

from formview.errors.types import Errors, FieldError, ObjectError
from formview.messages.resolver import MessageAttrs, MessageResolver
from formview.rendering.extractor import ExtractAttrs

logger = logging.getLogger(__name__)

# Characters outside the XML 1.0 Char production
_XML_ILLEGAL = re.compile("[^\x09\x0A\x0D\x20-\uD7FF\uE000-\uFFFD\U00010000-\U0010FFFF]")


def xml_text(value: Any) -> str:
    """String form of a value with characters XML cannot carry removed."""
    return _XML_ILLEGAL.sub("", str(value))


class RenderMode(Enum):
    """Supported output modes for ``render_errors``."""

    LIST = "list"
    XML = "xml"

    @classmethod
    def parse(cls, value: "RenderMode | str | None") -> "RenderMode":
        """Parse a mode name; unknown names fall back to LIST."""
        if isinstance(value, RenderMode):
            return value
        if not value:
            return cls.LIST
        try:
            return cls(value.lower())
        except ValueError:
            logger.debug("Unsupported render mode '%s', rendering as list", value)
            return cls.LIST


@dataclass
class RenderAttrs(ExtractAttrs):
    """Options for iterating and rendering errors.

    Attributes:
        as_: Output mode ("list" or "xml"); anything else renders as a list
        codec: Codec for list items. None uses the environment default
            ("HTML"); "none" disables encoding.
        var: When set, callbacks receive ``{var: error}`` instead of the error
        locale: Overrides the request locale for message resolution
    """

    as_: RenderMode | str | None = None
    codec: str | None = None
    var: str | None = None
    locale: Locale | str | None = None


ErrorCallback = Callable[[Any], Any]


def flatten_errors(containers: list[Errors], field: str | None = None) -> list[ObjectError]:
    """Concatenate the errors of every container, preserving per-container order.

    Without a field filter every error (global and field) is included; with
    one, only that field's errors are.
    """
    flat: list[ObjectError] = []
    for errors in containers:
        if field:
            flat.extend(errors.get_field_errors(field))
        else:
            flat.extend(errors.all_errors)
    return flat


class ErrorRenderer:
    """Iterates and renders a list of error containers."""

    def __init__(self, resolver: MessageResolver, default_codec: str = "HTML"):
        self.resolver = resolver
        self.default_codec = default_codec

    def for_each(self, attrs: RenderAttrs, containers: list[Errors], callback: ErrorCallback) -> list[Any]:
        """Invoke the callback once per error and return the callback results."""
        results = []
        for error in flatten_errors(containers, attrs.field):
            if attrs.var:
                results.append(callback({attrs.var: error}))
            else:
                results.append(callback(error))
        return results

    def render(self, attrs: RenderAttrs, containers: list[Errors]) -> str:
        if RenderMode.parse(attrs.as_) is RenderMode.XML:
            return self.render_xml(attrs, containers)
        return self.render_list(attrs, containers)

    def render_list(self, attrs: RenderAttrs, containers: list[Errors]) -> str:
        if not containers:
            return ""
        codec = attrs.codec or self.default_codec
        if codec.lower() == "none":
            codec = ""

        items = self.for_each(
            RenderAttrs(field=attrs.field),
            containers,
            lambda error: f"<li>{self._message(error, attrs, encode_as=codec)}</li>",
        )
        return "<ul>" + "".join(items) + "</ul>"

    def render_xml(self, attrs: RenderAttrs, containers: list[Errors]) -> str:
        root = ET.Element("errors")
        for error in flatten_errors(containers, attrs.field):
            element = ET.SubElement(root, "error")
            element.set("object", xml_text(error.object_name))
            if isinstance(error, FieldError):
                element.set("field", xml_text(error.field))
            element.set("message", xml_text(self._message(error, attrs)))
            if isinstance(error, FieldError) and error.rejected_value is not None:
                element.set("rejected-value", xml_text(error.rejected_value))
        return ET.tostring(root, encoding="unicode")

    def _message(self, error: ObjectError, attrs: RenderAttrs, encode_as: str | None = None) -> str:
        return self.resolver.resolve(
            MessageAttrs(error=error, encode_as=encode_as or None, locale=attrs.locale)
        )
