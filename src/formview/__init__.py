"""formview: render validation errors, messages and client-side validation scripts.

Usage:
    from formview import (
        FormViewConfig,
        RenderAttrs,
        RequestContext,
        TagEnvironment,
        ValidationTags,
    )

    env = TagEnvironment.from_config(FormViewConfig.from_env())
    tags = ValidationTags(env, RequestContext(locale="en", attributes=request_attrs))
    tags.render_errors(RenderAttrs(bean=book))
"""

from formview.codecs import CodecRegistry
from formview.config import FormViewConfig
from formview.constraints import (
    ConstraintDescriptor,
    ConstraintLoader,
    ConstraintSource,
    StaticConstraintSource,
    ValidatorRuleType,
)
from formview.core import (
    UNSET,
    AttributeScanner,
    FieldAccessible,
    MappingAttributeScanner,
    RequestContext,
)
from formview.errors import (
    DefaultMessageResolvable,
    Errors,
    FieldError,
    MessageResolvable,
    ObjectError,
)
from formview.exceptions import (
    FormViewError,
    MetadataError,
    MissingRequiredAttribute,
    NoSuchMessage,
    TagError,
    UnknownCodec,
    ValidationTargetNotFound,
)
from formview.formatting import (
    DateEditor,
    EnumEditor,
    PropertyEditor,
    PropertyEditorRegistry,
    ValueFormatter,
)
from formview.messages import (
    MessageAttrs,
    MessageCatalog,
    MessageCatalogLoader,
    MessageResolver,
    StaticMessageCatalog,
)
from formview.rendering import (
    ErrorExtractor,
    ErrorRenderer,
    ExtractAttrs,
    RenderAttrs,
    RenderMode,
)
from formview.script import ConstraintScriptGenerator, ScriptRenderer, ValidationScript
from formview.tags import TagEnvironment, ValidationTags

__all__ = [
    # Tags
    "TagEnvironment",
    "ValidationTags",
    # Config and context
    "FormViewConfig",
    "RequestContext",
    "AttributeScanner",
    "MappingAttributeScanner",
    "FieldAccessible",
    "UNSET",
    # Errors
    "Errors",
    "FieldError",
    "ObjectError",
    "MessageResolvable",
    "DefaultMessageResolvable",
    # Messages
    "MessageAttrs",
    "MessageCatalog",
    "MessageCatalogLoader",
    "MessageResolver",
    "StaticMessageCatalog",
    # Formatting
    "CodecRegistry",
    "DateEditor",
    "EnumEditor",
    "PropertyEditor",
    "PropertyEditorRegistry",
    "ValueFormatter",
    # Rendering
    "ErrorExtractor",
    "ErrorRenderer",
    "ExtractAttrs",
    "RenderAttrs",
    "RenderMode",
    # Constraints and scripts
    "ConstraintDescriptor",
    "ConstraintLoader",
    "ConstraintSource",
    "StaticConstraintSource",
    "ValidatorRuleType",
    "ConstraintScriptGenerator",
    "ScriptRenderer",
    "ValidationScript",
    # Exceptions
    "FormViewError",
    "MetadataError",
    "MissingRequiredAttribute",
    "NoSuchMessage",
    "TagError",
    "UnknownCodec",
    "ValidationTargetNotFound",
]
