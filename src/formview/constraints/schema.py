"""
constraints/schema.py: JSON Schema validation for constraint metadata files.

Usage:
    from formview.constraints.schema import validate_constraints_dir

    issues = validate_constraints_dir(Path("constraints"))
    for issue in issues:
        print(issue)
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError
from referencing import Registry, Resource
from referencing.jsonschema import DRAFT202012

logger = logging.getLogger(__name__)

_SCHEMAS_DIR = Path(__file__).parent / "schemas"
_CONSTRAINTS_SCHEMA = "constraints.schema.json"


@dataclass
class SchemaIssue:
    """A single validation finding for a constraint YAML file."""

    file: Path
    message: str
    path: str = ""          # JSON pointer path within the document, e.g. "properties/title/0"
    severity: str = "error"

    def __str__(self) -> str:
        loc = f" at {self.path}" if self.path else ""
        return f"[{self.severity.upper()}] {self.file}{loc}: {self.message}"


def _load_schema(name: str) -> dict[str, Any]:
    with (_SCHEMAS_DIR / name).open(encoding="utf-8") as fh:
        return json.load(fh)


@lru_cache(maxsize=1)
def _validator() -> Draft202012Validator:
    schema = _load_schema(_CONSTRAINTS_SCHEMA)
    registry = Registry().with_resources(
        [(schema["$id"], Resource(contents=schema, specification=DRAFT202012))]
    )
    return Draft202012Validator(schema, registry=registry)


def _json_path(error: ValidationError) -> str:
    return "/".join(str(p) for p in error.absolute_path)


def validate_document(data: Any, file: Path) -> list[SchemaIssue]:
    """Validate an already-parsed YAML document."""
    return [
        SchemaIssue(file=file, message=error.message, path=_json_path(error))
        for error in sorted(_validator().iter_errors(data), key=lambda e: list(e.absolute_path))
    ]


def validate_constraints_file(yaml_path: Path) -> list[SchemaIssue]:
    """Parse and validate one constraint file."""
    try:
        with yaml_path.open(encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except yaml.YAMLError as e:
        return [SchemaIssue(file=yaml_path, message=f"Invalid YAML: {e}")]

    if data is None:
        return [SchemaIssue(file=yaml_path, message="File is empty", severity="warning")]
    return validate_document(data, yaml_path)


def validate_constraints_dir(constraints_path: Path) -> list[SchemaIssue]:
    """Validate every ``*.yaml`` file in a directory."""
    if not constraints_path.exists():
        logger.warning("Constraint directory %s does not exist", constraints_path)
        return []
    issues: list[SchemaIssue] = []
    for yaml_file in sorted(constraints_path.glob("*.yaml")):
        issues.extend(validate_constraints_file(yaml_file))
    return issues
