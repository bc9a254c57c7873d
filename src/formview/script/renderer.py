"""Render a ValidationScript model as a ``<script>`` block with Jinja2."""

import json
from typing import Any

from jinja2 import Environment, PackageLoader, StrictUndefined

from formview.script.model import ConstantParam, FieldRule, RangeParam, ValidationScript

TEMPLATE_NAME = "validation.js.j2"


def js_literal(value: Any) -> str:
    """Encode a Python value as a JavaScript literal safe inside a ``<script>`` block.

    Values JSON cannot represent (dates, for instance) are emitted as strings.
    ``</`` is escaped so no literal can close the enclosing script element.
    """
    return json.dumps(value, default=str).replace("</", "<\\/")


def accessor_source(rule: FieldRule) -> str | None:
    """JavaScript closure returning the rule parameter, or None for parameterless rules."""
    param = rule.param
    if isinstance(param, ConstantParam):
        return f"function() {{ return {js_literal(param.value)}; }}"
    if isinstance(param, RangeParam):
        return (
            "function() { if (arguments[0] == 'min') "
            f"return {js_literal(param.low)}; else return {js_literal(param.high)}; }}"
        )
    return None


def field_arguments(rule: FieldRule, form: str) -> str:
    """Arguments of the ``new Array(...)`` initializer for one field."""
    parts = [
        f"document.forms[{js_literal(form)}].elements[{js_literal(rule.property_name)}]",
        js_literal(rule.message),
    ]
    accessor = accessor_source(rule)
    if accessor is not None:
        parts.append(accessor)
    return ", ".join(parts)


def build_script_environment() -> Environment:
    """Jinja2 environment for script templates shipped with the package."""
    env = Environment(
        loader=PackageLoader("formview", "script/templates"),
        keep_trailing_newline=False,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
        autoescape=False,
    )
    env.filters["js"] = js_literal
    env.filters["field_arguments"] = field_arguments
    return env


class ScriptRenderer:
    """Turns a script model into text."""

    def __init__(self, environment: Environment | None = None):
        self.environment = environment or build_script_environment()

    def render(self, script: ValidationScript) -> str:
        template = self.environment.get_template(TEMPLATE_NAME)
        return template.render(script=script)
