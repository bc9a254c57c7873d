"""Discover the error containers a render call should look at.

Exactly one source is consulted per call, chosen by which attribute is
present: an explicit bean, else an explicit model mapping, else a scan of the
ambient request attributes. "Present" means supplied at all; a bean supplied
as None yields nothing rather than falling through to the model.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from formview.core.access import errors_of
from formview.core.context import UNSET, RequestContext, is_set
from formview.errors.types import Errors

logger = logging.getLogger(__name__)


@dataclass
class ExtractAttrs:
    """Selects the error containers for a tag.

    Attributes:
        bean: Subject to check (an object exposing ``errors`` or an Errors itself)
        model: Mapping of name -> subject; values whose ``errors`` is an
            Errors container are checked in mapping order
        field: Only containers with errors on this field are kept
    """

    bean: Any = UNSET
    model: Any = UNSET
    field: str | None = None


class ErrorExtractor:
    """Collects non-empty error containers for the current request."""

    def __init__(self, request: RequestContext):
        self.request = request

    def extract(self, attrs: ExtractAttrs) -> list[Errors]:
        candidates = self._candidates(attrs)

        result: list[Errors] = []
        for candidate in candidates:
            errors = errors_of(candidate)
            if errors is None or not errors.has_errors():
                continue
            if attrs.field and not errors.has_field_errors(attrs.field):
                continue
            result.append(errors)
        return result

    def _candidates(self, attrs: ExtractAttrs) -> list[Any]:
        if is_set(attrs.bean):
            return [attrs.bean] if attrs.bean else []

        if is_set(attrs.model):
            return self._from_model(attrs.model)

        return self._from_request()

    def _from_model(self, model: Mapping[str, Any] | None) -> list[Any]:
        if not model:
            return []
        selected = []
        for value in model.values():
            if value is None or isinstance(value, Errors):
                continue
            if errors_of(value) is not None:
                selected.append(value)
        return selected

    def _from_request(self) -> list[Errors]:
        """Scan ambient attributes, keeping each container only once."""
        found: list[Errors] = []
        seen: set[int] = set()
        for name, value in self.request.attribute_scanner().scan():
            if not value:
                continue
            errors = errors_of(value)
            if errors is None:
                continue
            if id(errors) in seen:
                logger.debug("Request attribute '%s' repeats an already collected error container", name)
                continue
            seen.add(id(errors))
            found.append(errors)
        return found
