"""Key normalization for parsed YAML metadata.

PyYAML parses the bare keys ``on:`` and ``off:`` as booleans (YAML 1.1). Both
message bundles and constraint files expect them back as strings.
"""

from typing import Any


def key_text(key: Any) -> str:
    if key is True:
        return "on"
    if key is False:
        return "off"
    return str(key)


def normalize_keys(obj: Any) -> Any:
    """Recursively turn boolean mapping keys back into "on"/"off"."""
    if isinstance(obj, dict):
        return {
            (key_text(k) if isinstance(k, bool) else k): normalize_keys(v)
            for k, v in obj.items()
        }
    if isinstance(obj, list):
        return [normalize_keys(item) for item in obj]
    return obj
