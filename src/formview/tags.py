"""Validation tags: the surface a templating layer calls.

A ``TagEnvironment`` holds the read-only collaborators shared by all requests
(catalog, codecs, editors, constraint metadata). ``ValidationTags`` binds an
environment to one request and exposes the tag operations.

Usage:
    env = TagEnvironment.from_config(FormViewConfig.from_env())

    tags = ValidationTags(env, RequestContext(locale="de", attributes=model))
    html = tags.render_errors(RenderAttrs(bean=book))
    script = tags.generate_validation_script("book")
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from babel import Locale

from formview.codecs import CodecRegistry
from formview.config import FormViewConfig
from formview.constraints.loader import ConstraintLoader
from formview.constraints.types import ConstraintSource, StaticConstraintSource
from formview.core.access import exposes_errors, get_path
from formview.core.context import RequestContext
from formview.errors.types import Errors
from formview.formatting.editors import PropertyEditorRegistry
from formview.formatting.formatter import ValueFormatter
from formview.messages.catalog import MessageCatalog, StaticMessageCatalog
from formview.messages.loader import MessageCatalogLoader
from formview.messages.resolver import MessageAttrs, MessageResolver
from formview.rendering.extractor import ErrorExtractor, ExtractAttrs
from formview.rendering.renderer import ErrorRenderer, RenderAttrs
from formview.script.generator import ConstraintScriptGenerator

logger = logging.getLogger(__name__)


@dataclass
class TagEnvironment:
    """Collaborators shared by every request; never written to while serving."""

    catalog: MessageCatalog = field(default_factory=StaticMessageCatalog)
    codecs: CodecRegistry = field(default_factory=CodecRegistry.with_builtins)
    editors: PropertyEditorRegistry = field(default_factory=PropertyEditorRegistry)
    constraints: ConstraintSource = field(default_factory=StaticConstraintSource)
    config: FormViewConfig = field(default_factory=FormViewConfig)

    @classmethod
    def from_config(cls, config: FormViewConfig) -> TagEnvironment:
        """Load the message catalog and constraint metadata named by the config."""
        catalog = (
            MessageCatalogLoader(config.messages_dir).load()
            if config.messages_dir is not None
            else StaticMessageCatalog()
        )
        constraints = (
            ConstraintLoader(config.constraints_dir).load()
            if config.constraints_dir is not None
            else StaticConstraintSource()
        )
        logger.info(
            "Tag environment ready (messages: %s, constraints: %s)",
            config.messages_dir,
            config.constraints_dir,
        )
        return cls(catalog=catalog, constraints=constraints, config=config)

    def request(
        self,
        locale: Locale | str | None = None,
        attributes: dict[str, Any] | None = None,
        html_encoding: bool | None = None,
    ) -> RequestContext:
        """Build a request context with the configured defaults."""
        return RequestContext(
            locale=locale or self.config.default_locale,
            attributes=attributes or {},
            html_encoding=self.config.html_encoding if html_encoding is None else html_encoding,
        )


class ValidationTags:
    """Tag operations bound to one request."""

    def __init__(self, env: TagEnvironment, request: RequestContext):
        self.env = env
        self.request = request
        self.resolver = MessageResolver(env.catalog, env.codecs, request)
        self.extractor = ErrorExtractor(request)
        self.renderer = ErrorRenderer(self.resolver, default_codec=env.config.list_codec)
        self.formatter = ValueFormatter(env.editors, self.resolver, env.codecs, request)
        self.generator = ConstraintScriptGenerator(env.constraints)

    # -------------------------------------------------------------------------
    # Messages and values
    # -------------------------------------------------------------------------

    def resolve_message(self, attrs: MessageAttrs) -> str:
        return self.resolver.resolve(attrs)

    def format_value(self, value: Any, field_path: str | None = None) -> str:
        return self.formatter.format(value, field_path)

    # -------------------------------------------------------------------------
    # Errors
    # -------------------------------------------------------------------------

    def extract_errors(self, attrs: ExtractAttrs) -> list[Errors]:
        return self.extractor.extract(attrs)

    def has_errors(self, attrs: ExtractAttrs, body: Callable[[], str]) -> str:
        """Render the body only when there is at least one matching container."""
        if self.extract_errors(attrs):
            return body()
        return ""

    def for_each_error(self, attrs: RenderAttrs, callback: Callable[[Any], Any]) -> None:
        self.renderer.for_each(attrs, self.extract_errors(attrs), callback)

    def each_error(self, attrs: RenderAttrs, body: Callable[[Any], Any]) -> str:
        """Concatenate the body output for every matching error."""
        results = self.renderer.for_each(attrs, self.extract_errors(attrs), body)
        return "".join("" if r is None else str(r) for r in results)

    def render_errors(self, attrs: RenderAttrs) -> str:
        return self.renderer.render(attrs, self.extract_errors(attrs))

    def render_errors_as_list(self, attrs: RenderAttrs) -> str:
        return self.renderer.render_list(attrs, self.extract_errors(attrs))

    def render_errors_as_xml(self, attrs: RenderAttrs) -> str:
        return self.renderer.render_xml(attrs, self.extract_errors(attrs))

    def field_error(self, bean: Any, field_name: str | None) -> str:
        """HTML-encoded message of the first error on a bean's field."""
        if not bean or not field_name:
            return ""
        if not exposes_errors(bean):
            return ""
        errors = get_path(bean, "errors")
        error = errors.get_field_error(field_name) if isinstance(errors, Errors) else None
        return self.resolver.resolve(MessageAttrs(error=error, encode_as="HTML"))

    def field_value(self, bean: Any, field_name: str | None) -> str:
        """The rejected value of a field, or the bean's live value when none was rejected."""
        if not bean or not field_name:
            return ""
        field_name = str(field_name)

        value = None
        if exposes_errors(bean):
            errors = get_path(bean, "errors")
            if isinstance(errors, Errors):
                error = errors.get_field_error(field_name)
                value = error.rejected_value if error is not None else None
        if value is None:
            value = get_path(bean, field_name)

        if value is None:
            return ""
        return self.format_value(value, field_name)

    # -------------------------------------------------------------------------
    # Client-side validation
    # -------------------------------------------------------------------------

    def generate_validation_script(self, form: str | None, against: str | None = None) -> str:
        return self.generator.generate(form, against)
