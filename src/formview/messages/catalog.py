"""Message catalog: localized text keyed by code and locale.

Lookup walks the locale fallback chain (``de_AT`` -> ``de`` -> root bundle).
Placeholders use positional indexes: ``{0}``, ``{1}``; a format suffix such as
``{0,number}`` is accepted and ignored.
"""

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from babel import Locale

from formview.errors.types import MessageResolvable
from formview.exceptions import NoSuchMessage

logger = logging.getLogger(__name__)

ROOT_BUNDLE = ""

# Pattern: {index[,format]}
PLACEHOLDER = re.compile(r"\{(?P<index>\d+)(?:,[^{}]*)?\}")


class MessageCatalog(Protocol):
    """Resolves message codes to localized text."""

    def get_message(self, resolvable: MessageResolvable, locale: Locale) -> str:
        """Resolve a resolvable, trying each code and then its default message.

        Raises:
            NoSuchMessage: If nothing resolves
        """
        ...

    def get_message_or_default(
        self,
        code: str,
        args: Sequence[Any] | None,
        default: str | None,
        locale: Locale,
    ) -> str | None:
        """Resolve a code, returning the default when the catalog has no entry."""
        ...


def locale_chain(locale: Locale | None) -> list[str]:
    """Bundle names to try for a locale, most specific first."""
    if locale is None:
        return [ROOT_BUNDLE]
    chain: list[str] = []
    if locale.territory:
        chain.append(f"{locale.language}_{locale.territory}")
    chain.append(locale.language)
    chain.append(ROOT_BUNDLE)
    return chain


def format_message(template: str, args: Sequence[Any] | None) -> str:
    """Substitute positional arguments into a message template.

    Templates are only formatted when arguments are supplied. Indexes without a
    matching argument are left untouched.
    """
    if not args:
        return template

    def replace(match: re.Match) -> str:
        index = int(match.group("index"))
        if index >= len(args):
            return match.group(0)
        value = args[index]
        return "" if value is None else str(value)

    return PLACEHOLDER.sub(replace, template)


class StaticMessageCatalog:
    """In-memory catalog built from ``{bundle: {code: text}}`` mappings.

    The root bundle is keyed by the empty string; other bundles by locale
    identifier ("de", "de_DE").
    """

    def __init__(self, bundles: Mapping[str, Mapping[str, str]] | None = None):
        self.bundles: dict[str, dict[str, str]] = {}
        for name, messages in (bundles or {}).items():
            self.add_bundle(name, messages)

    def add_bundle(self, name: str, messages: Mapping[str, str]) -> None:
        """Merge messages into a bundle; later entries win."""
        key = name.replace("-", "_")
        self.bundles.setdefault(key, {}).update({str(k): str(v) for k, v in messages.items()})

    def lookup(self, code: str, locale: Locale | None) -> str | None:
        """Return the raw template for a code, or None."""
        for bundle_name in locale_chain(locale):
            bundle = self.bundles.get(bundle_name)
            if bundle is not None and code in bundle:
                return bundle[code]
        return None

    def get_message(self, resolvable: MessageResolvable, locale: Locale) -> str:
        args = self._resolve_arguments(resolvable.arguments, locale)
        for code in resolvable.codes or ():
            template = self.lookup(code, locale)
            if template is not None:
                return format_message(template, args)
        if resolvable.default_message is not None:
            return format_message(resolvable.default_message, args)
        raise NoSuchMessage(list(resolvable.codes or ()), str(locale))

    def get_message_or_default(
        self,
        code: str,
        args: Sequence[Any] | None,
        default: str | None,
        locale: Locale,
    ) -> str | None:
        resolved_args = self._resolve_arguments(args, locale)
        template = self.lookup(code, locale)
        if template is not None:
            return format_message(template, resolved_args)
        if default is None:
            return None
        return format_message(default, resolved_args)

    def _resolve_arguments(self, args: Sequence[Any] | None, locale: Locale) -> list[Any]:
        """Resolve arguments that are themselves message-resolvable."""
        resolved: list[Any] = []
        for arg in args or ():
            if isinstance(arg, MessageResolvable) and not isinstance(arg, str):
                try:
                    resolved.append(self.get_message(arg, locale))
                except NoSuchMessage:
                    logger.debug("Message argument %s did not resolve, using its code", arg)
                    resolved.append(arg.codes[-1] if arg.codes else str(arg))
            else:
                resolved.append(arg)
        return resolved
