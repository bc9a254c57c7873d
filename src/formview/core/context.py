"""Request-scoped context handed to every tag call."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from babel import Locale


class _Unset:
    """Marker for an attribute that was not supplied at all (as opposed to None)."""

    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


def is_set(value: Any) -> bool:
    return value is not UNSET


class AttributeScanner(Protocol):
    """Supplies the ambient request attributes in a deterministic order."""

    def scan(self) -> Iterable[tuple[str, Any]]:
        """Yield (name, value) pairs for every request attribute."""
        ...


class MappingAttributeScanner:
    """Scans a plain mapping in its iteration order."""

    def __init__(self, attributes: Mapping[str, Any]):
        self.attributes = attributes

    def scan(self) -> Iterable[tuple[str, Any]]:
        return list(self.attributes.items())


def to_locale(value: Locale | str | None, default: Locale | str = "en") -> Locale:
    """Parse a locale identifier ("de", "de_DE", "de-DE") into a Babel Locale."""
    if isinstance(value, Locale):
        return value
    if not value:
        return to_locale(default)
    return Locale.parse(str(value).replace("-", "_"))


@dataclass
class RequestContext:
    """What the rendering layer knows about the current request.

    Attributes:
        locale: Locale detected for the request
        attributes: Ambient request attributes (name -> value), scanned when no
            bean or model is given to an error tag
        html_encoding: Whether HTML encoding is the default output mode
        scanner: Overrides how ambient attributes are enumerated
    """

    locale: Locale | str = "en"
    attributes: Mapping[str, Any] = field(default_factory=dict)
    html_encoding: bool = True
    scanner: AttributeScanner | None = None

    def __post_init__(self) -> None:
        self.locale = to_locale(self.locale)

    def attribute_scanner(self) -> AttributeScanner:
        if self.scanner is not None:
            return self.scanner
        return MappingAttributeScanner(self.attributes)
