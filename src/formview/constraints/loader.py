"""Load domain type constraint metadata from YAML files.

Each file describes one type::

    type: Book
    properties:
      title:
        - nullable: false
        - maxSize: 100
      isbn:
        - matches: "[0-9-]{10,17}"
      pages:
        - range: {from: 1, to: 5000}

A property may also map directly to ``{kind: params}`` pairs; mapping order is
kept either way.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from formview.constraints.schema import validate_document
from formview.constraints.types import ConstraintDescriptor, StaticConstraintSource
from formview.core.yaml_keys import normalize_keys
from formview.exceptions import MetadataError

logger = logging.getLogger(__name__)


def normalize_params(kind: str, raw: Any) -> dict[str, Any]:
    """Turn the YAML value of a constraint into a params mapping."""
    if isinstance(raw, dict):
        return {str(k): v for k, v in raw.items()}
    if isinstance(raw, (list, tuple)) and kind in ("range", "size", "length") and len(raw) == 2:
        low, high = raw
        if kind == "length":
            return {"min": low, "max": high}
        return {"from": low, "to": high}
    if kind == "matches":
        return {"regex": raw}
    return {"value": raw}


class ConstraintLoader:
    """Loads constraint metadata files into a StaticConstraintSource."""

    def __init__(self, constraints_path: Path):
        self.constraints_path = constraints_path

    def load(self) -> StaticConstraintSource:
        source = StaticConstraintSource()
        if not self.constraints_path.exists():
            logger.warning("Constraint directory %s does not exist", self.constraints_path)
            return source

        for yaml_file in sorted(self.constraints_path.glob("*.yaml")):
            with open(yaml_file, encoding="utf-8") as f:
                try:
                    data = yaml.safe_load(f)
                except yaml.YAMLError as e:
                    raise MetadataError(f"Invalid YAML in {yaml_file}: {e}") from e
            if data is None:
                continue

            data = normalize_keys(data)
            issues = validate_document(data, yaml_file)
            if issues:
                raise MetadataError("\n".join(str(issue) for issue in issues))

            type_name = data["type"]
            source.add_type(type_name, self._resolve_properties(data["properties"]))
        return source

    def _resolve_properties(self, data: dict[str, Any]) -> dict[str, list[ConstraintDescriptor]]:
        resolved: dict[str, list[ConstraintDescriptor]] = {}
        for property_name, entries in data.items():
            if isinstance(entries, dict):
                pairs = list(entries.items())
            else:
                pairs = [next(iter(entry.items())) for entry in entries]
            resolved[str(property_name)] = [
                ConstraintDescriptor(
                    property_name=str(property_name),
                    kind=str(kind),
                    params=normalize_params(str(kind), raw),
                )
                for kind, raw in pairs
            ]
        return resolved
