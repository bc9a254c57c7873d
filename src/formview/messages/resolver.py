"""Resolve errors, resolvable objects and bare codes to localized text."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from babel import Locale

from formview.codecs import CodecRegistry
from formview.core.context import UNSET, RequestContext, is_set, to_locale
from formview.errors.types import DefaultMessageResolvable, MessageResolvable
from formview.exceptions import NoSuchMessage
from formview.messages.catalog import MessageCatalog

logger = logging.getLogger(__name__)


@dataclass
class MessageAttrs:
    """Options for a single message lookup.

    Attributes:
        error: Error to resolve; takes precedence over ``message``
        message: Any message-resolvable object to resolve
        code: Code to resolve when neither error nor message is given
        args: Positional arguments for ``code``
        default: Text used when ``code`` has no catalog entry. When not
            supplied at all the code itself is used; an explicit empty string
            is honoured.
        encode_as: Codec applied to non-empty results
        locale: Overrides the request locale
    """

    error: Any = None
    message: Any = None
    code: str | None = None
    args: Sequence[Any] | None = None
    default: Any = UNSET
    encode_as: str | None = None
    locale: Locale | str | None = None


class MessageResolver:
    """Turns MessageAttrs into display text using a catalog and codecs.

    Lookup failures for errors and resolvable objects never reach the caller:
    the text degrades to the object's code, then to its string form.
    """

    def __init__(
        self,
        catalog: MessageCatalog,
        codecs: CodecRegistry,
        request: RequestContext,
    ):
        self.catalog = catalog
        self.codecs = codecs
        self.request = request

    def effective_locale(self, attrs: MessageAttrs) -> Locale:
        if attrs.locale:
            return to_locale(attrs.locale)
        return self.request.locale  # type: ignore[return-value]

    def resolve(self, attrs: MessageAttrs) -> str:
        locale = self.effective_locale(attrs)
        text: str | None = None

        subject = attrs.error or attrs.message
        if subject:
            text = self._resolve_subject(subject, locale)
        elif attrs.code:
            default = attrs.default if is_set(attrs.default) else attrs.code
            text = self.catalog.get_message_or_default(
                attrs.code,
                list(attrs.args) if attrs.args is not None else None,
                default,
                locale,
            )
            if text is None:
                text = default

        if not text:
            return ""
        text = str(text)
        if attrs.encode_as:
            return self.codecs.encode(attrs.encode_as, text)
        return text

    def _resolve_subject(self, subject: Any, locale: Locale) -> str:
        if isinstance(subject, str):
            resolvable: Any = DefaultMessageResolvable(codes=(subject,))
        elif isinstance(subject, MessageResolvable):
            resolvable = subject
        else:
            return str(subject)

        try:
            return self.catalog.get_message(resolvable, locale)
        except NoSuchMessage:
            logger.debug("No message for %s in locale %s, falling back", resolvable.codes, locale)
            if isinstance(subject, str):
                return subject
            code = getattr(subject, "code", None)
            if code is None and subject.codes:
                code = subject.codes[-1]
            return code if code is not None else str(subject)
