"""Tests for error extraction, iteration and rendering."""

import logging
import xml.etree.ElementTree as ET

import pytest

from formview.core.context import RequestContext
from formview.errors.types import Errors, FieldError, ObjectError
from formview.rendering.extractor import ErrorExtractor, ExtractAttrs
from formview.rendering.renderer import (
    ErrorRenderer,
    RenderAttrs,
    RenderMode,
    flatten_errors,
    xml_text,
)


@pytest.fixture
def other_book(book_class):
    b = book_class(title="Emma")
    b.errors.reject_value("price", "min", rejected_value=-1)
    return b


@pytest.fixture
def clean_book(book_class):
    return book_class(title="Dune")


@pytest.fixture
def renderer(resolver):
    return ErrorRenderer(resolver)


# =============================================================================
# Extraction
# =============================================================================


class TestExtractFromBean:
    def test_bean_with_errors(self, book):
        extractor = ErrorExtractor(RequestContext())
        assert extractor.extract(ExtractAttrs(bean=book)) == [book.errors]

    def test_bean_without_errors(self, clean_book):
        extractor = ErrorExtractor(RequestContext())
        assert extractor.extract(ExtractAttrs(bean=clean_book)) == []

    def test_errors_container_as_bean(self, book):
        extractor = ErrorExtractor(RequestContext())
        assert extractor.extract(ExtractAttrs(bean=book.errors)) == [book.errors]

    def test_none_bean_does_not_fall_through(self, book):
        extractor = ErrorExtractor(RequestContext(attributes={"book": book}))
        assert extractor.extract(ExtractAttrs(bean=None, model={"book": book})) == []

    def test_field_filter(self, book):
        extractor = ErrorExtractor(RequestContext())
        assert extractor.extract(ExtractAttrs(bean=book, field="title")) == [book.errors]
        assert extractor.extract(ExtractAttrs(bean=book, field="price")) == []

    def test_bean_without_errors_property(self):
        extractor = ErrorExtractor(RequestContext())
        assert extractor.extract(ExtractAttrs(bean="just a string")) == []


class TestExtractFromModel:
    def test_model_order(self, book, other_book, clean_book):
        extractor = ErrorExtractor(RequestContext())
        model = {"second": other_book, "clean": clean_book, "first": book, "none": None}
        assert extractor.extract(ExtractAttrs(model=model)) == [other_book.errors, book.errors]

    def test_bare_containers_in_model_are_skipped(self, book):
        extractor = ErrorExtractor(RequestContext())
        assert extractor.extract(ExtractAttrs(model={"errors": book.errors})) == []

    def test_model_wins_over_request(self, book, other_book):
        extractor = ErrorExtractor(RequestContext(attributes={"book": book}))
        assert extractor.extract(ExtractAttrs(model={"other": other_book})) == [other_book.errors]

    def test_empty_model(self, book):
        extractor = ErrorExtractor(RequestContext(attributes={"book": book}))
        assert extractor.extract(ExtractAttrs(model={})) == []


class TestExtractFromRequest:
    def test_scan_in_attribute_order(self, book, other_book, clean_book):
        attributes = {"a": other_book, "b": clean_book, "c": book, "d": None, "e": 0}
        extractor = ErrorExtractor(RequestContext(attributes=attributes))
        assert extractor.extract(ExtractAttrs()) == [other_book.errors, book.errors]

    def test_bare_container_attribute(self, book):
        extractor = ErrorExtractor(RequestContext(attributes={"errors": book.errors}))
        assert extractor.extract(ExtractAttrs()) == [book.errors]

    def test_same_container_collected_once(self, book, caplog):
        attributes = {"book": book, "bookErrors": book.errors}
        extractor = ErrorExtractor(RequestContext(attributes=attributes))
        with caplog.at_level(logging.DEBUG, logger="formview.rendering.extractor"):
            assert extractor.extract(ExtractAttrs()) == [book.errors]
        assert "bookErrors" in caplog.text

    def test_custom_scanner(self, book, other_book):
        class ReversedScanner:
            def scan(self):
                return [("other", other_book), ("book", book)]

        extractor = ErrorExtractor(RequestContext(scanner=ReversedScanner()))
        assert extractor.extract(ExtractAttrs()) == [other_book.errors, book.errors]

    def test_nothing_in_request(self):
        assert ErrorExtractor(RequestContext()).extract(ExtractAttrs()) == []


# =============================================================================
# Iteration
# =============================================================================


class TestForEach:
    def test_all_errors_in_order(self, renderer, book, other_book):
        seen = []
        renderer.for_each(RenderAttrs(), [book.errors, other_book.errors], seen.append)
        assert [e.codes[-1] for e in seen] == ["invalid", "blank", "maxSize", "min"]

    def test_field_filter(self, renderer, book):
        seen = []
        renderer.for_each(RenderAttrs(field="title"), [book.errors], seen.append)
        assert all(isinstance(e, FieldError) and e.field == "title" for e in seen)
        assert len(seen) == 2

    def test_var_binding(self, renderer, book):
        results = renderer.for_each(RenderAttrs(var="err"), [book.errors], lambda scope: scope["err"].code)
        assert results == ["invalid", "blank", "maxSize"]

    def test_no_containers(self, renderer):
        assert renderer.for_each(RenderAttrs(), [], lambda e: e) == []

    def test_flatten_keeps_global_errors_without_filter(self, book):
        flat = flatten_errors([book.errors])
        assert isinstance(flat[0], ObjectError) and not isinstance(flat[0], FieldError)


# =============================================================================
# Rendering
# =============================================================================


class TestRenderList:
    def test_list(self, renderer, book):
        html = renderer.render_list(RenderAttrs(), [book.errors])
        assert html == (
            "<ul>"
            "<li>The book is invalid</li>"
            "<li>Property [title] of class [Book] cannot be blank</li>"
            "<li>Title is too long (max 5)</li>"
            "</ul>"
        )

    def test_empty(self, renderer):
        assert renderer.render_list(RenderAttrs(), []) == ""

    def test_messages_are_html_encoded(self, renderer):
        errors = Errors("book")
        errors.reject("markup")
        assert renderer.render_list(RenderAttrs(), [errors]) == (
            "<ul><li>&lt;b&gt;bold&lt;/b&gt; &amp; more</li></ul>"
        )

    def test_codec_none(self, renderer):
        errors = Errors("book")
        errors.reject("markup")
        html = renderer.render_list(RenderAttrs(codec="none"), [errors])
        assert html == "<ul><li><b>bold</b> & more</li></ul>"

    def test_field_filter(self, renderer, book):
        html = renderer.render_list(RenderAttrs(field="title"), [book.errors])
        assert "The book is invalid" not in html
        assert html.count("<li>") == 2

    def test_locale(self, renderer, book):
        html = renderer.render_list(RenderAttrs(field="title", locale="de"), [book.errors])
        assert "darf nicht leer sein" in html


class TestRenderXml:
    def test_xml(self, renderer, book):
        xml = renderer.render_xml(RenderAttrs(), [book.errors])
        root = ET.fromstring(xml)
        assert root.tag == "errors"
        errors = root.findall("error")
        assert len(errors) == 3
        assert errors[0].attrib == {"object": "book", "message": "The book is invalid"}
        assert errors[1].attrib == {
            "object": "book",
            "field": "title",
            "message": "Property [title] of class [Book] cannot be blank",
            "rejected-value": "",
        }
        assert errors[2].get("rejected-value") == "xxxxxxxxxx"

    def test_empty(self, renderer):
        assert renderer.render_xml(RenderAttrs(), []) == "<errors />"

    def test_attribute_escaping(self, renderer):
        errors = Errors("book")
        errors.reject_value("title", "markup", rejected_value='"<x>"')
        xml = renderer.render_xml(RenderAttrs(), [errors])
        assert 'message="&lt;b&gt;bold&lt;/b&gt; &amp; more"' in xml
        assert ET.fromstring(xml).find("error").get("rejected-value") == '"<x>"'

    def test_control_characters_are_removed(self, renderer):
        errors = Errors("book")
        errors.reject_value("title", "blank", rejected_value="bad\x01value\x1f")
        xml = renderer.render_xml(RenderAttrs(), [errors])
        element = ET.fromstring(xml).find("error")
        assert element.get("rejected-value") == "badvalue"

    def test_xml_text_keeps_legal_whitespace(self):
        assert xml_text("a\tb\nc\x00d\ufffe") == "a\tb\ncd"

    def test_render_dispatch(self, renderer, book):
        assert renderer.render(RenderAttrs(as_="xml"), [book.errors]).startswith("<errors>")
        assert renderer.render(RenderAttrs(as_="XML"), [book.errors]).startswith("<errors>")
        assert renderer.render(RenderAttrs(as_="table"), [book.errors]).startswith("<ul>")
        assert renderer.render(RenderAttrs(), [book.errors]).startswith("<ul>")


class TestRenderMode:
    def test_parse(self):
        assert RenderMode.parse("xml") is RenderMode.XML
        assert RenderMode.parse(RenderMode.XML) is RenderMode.XML
        assert RenderMode.parse(None) is RenderMode.LIST
        assert RenderMode.parse("json") is RenderMode.LIST
