"""Client-side validation script generation."""

from formview.script.generator import (
    ConstraintScriptGenerator,
    packaged_fragment,
    resolve_type_name,
)
from formview.script.model import (
    PLACEHOLDER_MESSAGE,
    ConstantParam,
    FieldRule,
    RangeParam,
    RuleFunction,
    ValidationScript,
)
from formview.script.renderer import ScriptRenderer

__all__ = [
    "PLACEHOLDER_MESSAGE",
    "ConstantParam",
    "ConstraintScriptGenerator",
    "FieldRule",
    "RangeParam",
    "RuleFunction",
    "ScriptRenderer",
    "ValidationScript",
    "packaged_fragment",
    "resolve_type_name",
]
