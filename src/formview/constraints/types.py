"""Constraint metadata and the client-side validator rule vocabulary."""

import numbers
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Protocol


class ValidatorRuleType(Enum):
    """Client-side validator rules that constraints are translated into."""

    REQUIRED = "required"
    EMAIL = "email"
    CREDIT_CARD = "creditCard"
    MASK = "mask"
    INT_RANGE = "intRange"
    FLOAT_RANGE = "floatRange"
    MAX_LENGTH = "maxLength"
    MIN_LENGTH = "minLength"

    @property
    def capitalized(self) -> str:
        """Rule name with a leading capital, as used in ``validateMaxLength``."""
        return self.value[:1].upper() + self.value[1:]


# Constraint kind -> rule types. Kinds missing here produce no client rule.
CONSTRAINT_RULE_MAP: dict[str, tuple[ValidatorRuleType, ...]] = {
    "email": (ValidatorRuleType.EMAIL,),
    "creditCard": (ValidatorRuleType.CREDIT_CARD,),
    "matches": (ValidatorRuleType.MASK,),
    "blank": (ValidatorRuleType.REQUIRED,),
    "nullable": (ValidatorRuleType.REQUIRED,),
    "maxSize": (ValidatorRuleType.MAX_LENGTH,),
    "minSize": (ValidatorRuleType.MIN_LENGTH,),
    "range": (ValidatorRuleType.INT_RANGE,),
    "size": (ValidatorRuleType.INT_RANGE,),
    "length": (ValidatorRuleType.MAX_LENGTH, ValidatorRuleType.MIN_LENGTH),
}


@dataclass(frozen=True)
class ConstraintDescriptor:
    """One declarative constraint applied to a domain property.

    Attributes:
        property_name: The constrained property
        kind: Constraint kind ("nullable", "maxSize", "matches", "range", ...)
        params: Kind-specific parameters. Scalar constraints keep their value
            under "value"; ranges use "from"/"to"; "matches" uses "regex";
            "length" uses "min"/"max".
    """

    property_name: str
    kind: str
    params: Mapping[str, Any] = field(default_factory=dict)

    @property
    def value(self) -> Any:
        return self.params.get("value")

    @property
    def regex(self) -> str | None:
        return self.params.get("regex", self.value)

    @property
    def range_from(self) -> Any:
        return self.params.get("from")

    @property
    def range_to(self) -> Any:
        return self.params.get("to")

    @property
    def max_size(self) -> Any:
        if self.kind == "maxSize":
            return self.value
        if self.kind in ("length", "size"):
            return self.params.get("max", self.range_to)
        return None

    @property
    def min_size(self) -> Any:
        if self.kind == "minSize":
            return self.value
        if self.kind in ("length", "size"):
            return self.params.get("min", self.range_from)
        return None


def rule_types_for(constraint: ConstraintDescriptor) -> tuple[ValidatorRuleType, ...]:
    """Translate a constraint into client rule types (empty if unmapped).

    A ``range`` with non-integral bounds becomes a float range.
    """
    rule_types = CONSTRAINT_RULE_MAP.get(constraint.kind, ())
    if constraint.kind == "range":
        bounds = (constraint.range_from, constraint.range_to)
        if any(b is not None and not isinstance(b, numbers.Integral) for b in bounds):
            return (ValidatorRuleType.FLOAT_RANGE,)
    return rule_types


ConstraintsByProperty = Mapping[str, Sequence[ConstraintDescriptor]]


class ConstraintSource(Protocol):
    """Read-only source of constraint metadata keyed by domain type name."""

    def constraints_for_type(self, type_name: str) -> ConstraintsByProperty | None:
        """Return property -> constraints for the type, or None if unknown."""
        ...


class StaticConstraintSource:
    """Constraint source backed by an in-memory mapping."""

    def __init__(self, types: Mapping[str, ConstraintsByProperty] | None = None):
        self.types: dict[str, ConstraintsByProperty] = dict(types or {})

    def add_type(self, type_name: str, constraints: ConstraintsByProperty) -> None:
        self.types[type_name] = constraints

    def constraints_for_type(self, type_name: str) -> ConstraintsByProperty | None:
        return self.types.get(type_name)

    def list_types(self) -> list[str]:
        return list(self.types.keys())
