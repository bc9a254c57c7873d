"""Shared fixtures for the formview test suite."""

from dataclasses import dataclass, field
from typing import Any

import pytest

from formview.codecs import CodecRegistry
from formview.core.context import RequestContext
from formview.errors.types import Errors
from formview.messages.catalog import StaticMessageCatalog
from formview.messages.resolver import MessageResolver
from formview.tags import TagEnvironment, ValidationTags


@dataclass
class Author:
    name: str | None = None


@dataclass
class Book:
    """A bean exposing an ``errors`` property, like a validated domain object."""

    title: str | None = None
    price: Any = None
    author: Author | None = None
    errors: Errors = field(default_factory=lambda: Errors("book"))


@pytest.fixture
def catalog():
    return StaticMessageCatalog(
        {
            "": {
                "blank": "Property [{0}] of class [{1}] cannot be blank",
                "maxSize.book.title": "Title is too long (max {0})",
                "invalid.book": "The book is invalid",
                "greeting": "Hello {0}",
                "markup": "<b>bold</b> & more",
            },
            "de": {
                "blank": "Eigenschaft [{0}] der Klasse [{1}] darf nicht leer sein",
                "greeting": "Hallo {0}",
            },
        }
    )


@pytest.fixture
def codecs():
    return CodecRegistry.with_builtins()


@pytest.fixture
def request_context():
    return RequestContext(locale="en")


@pytest.fixture
def resolver(catalog, codecs, request_context):
    return MessageResolver(catalog, codecs, request_context)


@pytest.fixture
def book():
    """A book with one global error and two field errors."""
    b = Book(title="", price=12.5)
    b.errors.reject("invalid")
    b.errors.reject_value("title", "blank", rejected_value="", arguments=("title", "Book"))
    b.errors.reject_value("title", "maxSize", rejected_value="x" * 10, arguments=(5,))
    return b


@pytest.fixture
def env(catalog):
    return TagEnvironment(catalog=catalog)


@pytest.fixture
def tags(env):
    return ValidationTags(env, RequestContext(locale="en"))


@pytest.fixture
def book_class():
    return Book


@pytest.fixture
def author_class():
    return Author
