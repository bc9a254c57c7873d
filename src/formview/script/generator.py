"""Translate domain constraints into a client-side validation script."""

import logging
from collections.abc import Callable
from importlib import resources

from formview.constraints.types import (
    ConstraintDescriptor,
    ConstraintSource,
    ConstraintsByProperty,
    ValidatorRuleType,
    rule_types_for,
)
from formview.exceptions import MissingRequiredAttribute, ValidationTargetNotFound
from formview.script.model import (
    ConstantParam,
    FieldRule,
    RangeParam,
    RuleFunction,
    RuleParam,
    ValidationScript,
)
from formview.script.renderer import ScriptRenderer

logger = logging.getLogger(__name__)

TAG_NAME = "validate"

FragmentLoader = Callable[[ValidatorRuleType], str | None]


def packaged_fragment(rule_type: ValidatorRuleType) -> str | None:
    """Load ``validators/validate<RuleType>.js`` shipped with the package."""
    name = f"validate{rule_type.capitalized}.js"
    resource = resources.files("formview.script").joinpath("validators", name)
    if not resource.is_file():
        logger.debug("No validator script fragment %s, omitting it", name)
        return None
    return resource.read_text(encoding="utf-8")


def resolve_type_name(form: str, against: str | None = None) -> str:
    """The domain type a form validates against: ``against`` or the capitalized form name."""
    if against:
        return against
    return form[:1].upper() + form[1:]


def param_for(rule_type: ValidatorRuleType, constraint: ConstraintDescriptor) -> RuleParam | None:
    if rule_type is ValidatorRuleType.MASK:
        return ConstantParam(constraint.regex)
    if rule_type in (ValidatorRuleType.INT_RANGE, ValidatorRuleType.FLOAT_RANGE):
        return RangeParam(constraint.range_from, constraint.range_to)
    if rule_type is ValidatorRuleType.MAX_LENGTH:
        return ConstantParam(constraint.max_size)
    if rule_type is ValidatorRuleType.MIN_LENGTH:
        return ConstantParam(constraint.min_size)
    return None


class ConstraintScriptGenerator:
    """Builds the validation script for a form from constraint metadata.

    Constraint kinds without a rule mapping are dropped. Rule functions are
    emitted in order of first appearance; a property appears once per rule.
    """

    def __init__(
        self,
        constraints: ConstraintSource,
        fragments: FragmentLoader | None = packaged_fragment,
        renderer: ScriptRenderer | None = None,
    ):
        self.constraints = constraints
        self.fragments = fragments
        self.renderer = renderer or ScriptRenderer()

    def generate(self, form: str | None, against: str | None = None) -> str:
        """Render the script for a form.

        Raises:
            MissingRequiredAttribute: If no form name is given
            ValidationTargetNotFound: If the resolved type has no constraint metadata
        """
        if not form:
            raise MissingRequiredAttribute(TAG_NAME, "form")

        type_name = resolve_type_name(form, against)
        constraints_by_property = self.constraints.constraints_for_type(type_name)
        if not constraints_by_property:
            raise ValidationTargetNotFound(TAG_NAME, type_name)

        return self.renderer.render(self.build(form, constraints_by_property))

    def build(self, form: str, constraints_by_property: ConstraintsByProperty) -> ValidationScript:
        """Group the flattened constraints by rule type into a script model."""
        if not form:
            raise MissingRequiredAttribute(TAG_NAME, "form")

        functions: dict[ValidatorRuleType, RuleFunction] = {}
        for constraint in self._flatten(constraints_by_property):
            rule_types = rule_types_for(constraint)
            if not rule_types:
                logger.debug(
                    "Constraint '%s' on %s has no client-side rule, skipping",
                    constraint.kind,
                    constraint.property_name,
                )
                continue
            for rule_type in rule_types:
                function = functions.get(rule_type)
                if function is None:
                    function = RuleFunction(form=form, rule_type=rule_type)
                    functions[rule_type] = function
                if function.has_property(constraint.property_name):
                    continue
                function.rules.append(
                    FieldRule(
                        property_name=constraint.property_name,
                        param=param_for(rule_type, constraint),
                    )
                )

        if self.fragments is not None:
            for function in functions.values():
                function.fragment = self.fragments(function.rule_type)

        return ValidationScript(form=form, functions=list(functions.values()))

    @staticmethod
    def _flatten(constraints_by_property: ConstraintsByProperty) -> list[ConstraintDescriptor]:
        flat: list[ConstraintDescriptor] = []
        for constraints in constraints_by_property.values():
            flat.extend(constraints)
        return flat
