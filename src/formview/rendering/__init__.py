"""Error extraction, iteration and rendering."""

from formview.rendering.extractor import ErrorExtractor, ExtractAttrs
from formview.rendering.renderer import (
    ErrorRenderer,
    RenderAttrs,
    RenderMode,
    flatten_errors,
)

__all__ = [
    "ErrorExtractor",
    "ErrorRenderer",
    "ExtractAttrs",
    "RenderAttrs",
    "RenderMode",
    "flatten_errors",
]
