"""Domain constraint metadata and its client validator vocabulary."""

from formview.constraints.loader import ConstraintLoader
from formview.constraints.schema import (
    SchemaIssue,
    validate_constraints_dir,
    validate_constraints_file,
)
from formview.constraints.types import (
    CONSTRAINT_RULE_MAP,
    ConstraintDescriptor,
    ConstraintSource,
    ConstraintsByProperty,
    StaticConstraintSource,
    ValidatorRuleType,
    rule_types_for,
)

__all__ = [
    "CONSTRAINT_RULE_MAP",
    "ConstraintDescriptor",
    "ConstraintLoader",
    "ConstraintSource",
    "ConstraintsByProperty",
    "SchemaIssue",
    "StaticConstraintSource",
    "ValidatorRuleType",
    "rule_types_for",
    "validate_constraints_dir",
    "validate_constraints_file",
]
