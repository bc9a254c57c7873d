"""Named text-encoding transforms applied to rendered output.

Codecs are looked up by name (case-insensitive). "none" and the empty name
mean identity. Asking for a name nobody registered is an error: skipping the
encoding silently would leak unescaped content into the page.
"""

from collections.abc import Callable
from urllib.parse import quote_plus

from markupsafe import escape

from formview.exceptions import UnknownCodec

EncodeFn = Callable[[str], str]

IDENTITY_NAMES = frozenset({"", "none"})

_JS_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\f": "\\f",
    "\b": "\\b",
    "\v": "\\v",
    "/": "\\/",
    "<": "\\u003C",
    ">": "\\u003E",
}


def encode_html(text: str) -> str:
    return str(escape(text))


def encode_javascript(text: str) -> str:
    """Escape text for use inside a single- or double-quoted JavaScript string."""
    return "".join(_JS_ESCAPES.get(ch, ch) for ch in text)


def encode_url(text: str) -> str:
    return quote_plus(text)


class CodecRegistry:
    """Registry of encoding transforms.

    Example:
        codecs = CodecRegistry.with_builtins()
        codecs.encode("HTML", "<b>")   # '&lt;b&gt;'
        codecs.encode("none", "<b>")   # '<b>'
    """

    def __init__(self) -> None:
        self._codecs: dict[str, EncodeFn] = {}
        self._names: dict[str, str] = {}

    @classmethod
    def with_builtins(cls) -> "CodecRegistry":
        registry = cls()
        registry.register("HTML", encode_html)
        registry.register("XML", encode_html)
        registry.register("JavaScript", encode_javascript)
        registry.register("URL", encode_url)
        return registry

    def register(self, name: str, encode: EncodeFn) -> None:
        """Register (or replace) a codec under a display name."""
        key = name.lower()
        if key in IDENTITY_NAMES:
            raise ValueError(f"'{name}' is reserved for the identity codec")
        self._codecs[key] = encode
        self._names[key] = name

    def is_registered(self, name: str) -> bool:
        return name.lower() in self._codecs

    def list_registered(self) -> list[str]:
        return sorted(self._names.values())

    def encode(self, name: str | None, text: str) -> str:
        """Apply the named codec.

        Raises:
            UnknownCodec: If the name is not registered
        """
        key = (name or "").lower()
        if key in IDENTITY_NAMES:
            return text
        encode = self._codecs.get(key)
        if encode is None:
            raise UnknownCodec(name or "", self.list_registered())
        return encode(text)
