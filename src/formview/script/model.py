"""Structured model of a generated client-side validation script.

The generator builds this model; ``ScriptRenderer`` turns it into text. Tests
can inspect functions and rules without diffing script source.
"""

from dataclasses import dataclass, field
from typing import Any

from formview.constraints.types import ValidatorRuleType

# Failure text emitted for every rule until messages are resolved per field
PLACEHOLDER_MESSAGE = "Test message"


@dataclass(frozen=True)
class ConstantParam:
    """Accessor returning a fixed value (mask regex, length bound)."""

    value: Any


@dataclass(frozen=True)
class RangeParam:
    """Accessor returning the lower bound for 'min' and the upper bound otherwise."""

    low: Any
    high: Any


RuleParam = ConstantParam | RangeParam


@dataclass(frozen=True)
class FieldRule:
    """One array-initializer statement: form element, message and accessor."""

    property_name: str
    message: str = PLACEHOLDER_MESSAGE
    param: RuleParam | None = None


@dataclass
class RuleFunction:
    """Generated constructor ``{form}_{ruleType}`` listing the fields a rule checks."""

    form: str
    rule_type: ValidatorRuleType
    rules: list[FieldRule] = field(default_factory=list)
    fragment: str | None = None

    @property
    def name(self) -> str:
        return f"{self.form}_{self.rule_type.value}"

    @property
    def validator_name(self) -> str:
        return f"validate{self.rule_type.capitalized}"

    def has_property(self, property_name: str) -> bool:
        return any(rule.property_name == property_name for rule in self.rules)


@dataclass
class ValidationScript:
    """All rule functions for one form, in emission order."""

    form: str
    functions: list[RuleFunction] = field(default_factory=list)

    @property
    def function_names(self) -> list[str]:
        return [f.name for f in self.functions]

    @property
    def rule_types(self) -> list[ValidatorRuleType]:
        return [f.rule_type for f in self.functions]

    def function_for(self, rule_type: ValidatorRuleType) -> RuleFunction | None:
        for function in self.functions:
            if function.rule_type is rule_type:
                return function
        return None
