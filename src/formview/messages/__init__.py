"""Message catalog, bundle loading and message resolution."""

from formview.messages.catalog import (
    MessageCatalog,
    StaticMessageCatalog,
    format_message,
    locale_chain,
)
from formview.messages.loader import MessageCatalogLoader
from formview.messages.resolver import MessageAttrs, MessageResolver

__all__ = [
    "MessageAttrs",
    "MessageCatalog",
    "MessageCatalogLoader",
    "MessageResolver",
    "StaticMessageCatalog",
    "format_message",
    "locale_chain",
]
