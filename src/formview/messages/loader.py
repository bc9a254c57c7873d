"""Load message bundles from YAML files.

Bundle files are named ``<basename>.yaml`` for the root bundle and
``<basename>_<locale>.yaml`` for localized bundles, e.g.::

    i18n/messages.yaml
    i18n/messages_de.yaml
    i18n/messages_pt_BR.yaml

Nested mappings are flattened into dotted codes, so

    default:
      blank:
        message: "Property [{0}] cannot be blank"

defines ``default.blank.message``.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from formview.core.yaml_keys import key_text
from formview.exceptions import MetadataError
from formview.messages.catalog import ROOT_BUNDLE, StaticMessageCatalog

logger = logging.getLogger(__name__)


def flatten_messages(data: dict[Any, Any], prefix: str = "") -> dict[str, str]:
    """Flatten a nested mapping into ``{"a.b.c": "text"}``."""
    flat: dict[str, str] = {}
    for key, value in data.items():
        code = f"{prefix}{key_text(key)}"
        if isinstance(value, dict):
            flat.update(flatten_messages(value, prefix=f"{code}."))
        elif value is None:
            flat[code] = ""
        else:
            flat[code] = str(value)
    return flat


def bundle_name_for(path: Path) -> str:
    """Derive the bundle (locale) name from a file name."""
    _, sep, locale = path.stem.partition("_")
    return locale if sep else ROOT_BUNDLE


class MessageCatalogLoader:
    """Loads every YAML bundle in a directory into one catalog."""

    def __init__(self, messages_path: Path):
        self.messages_path = messages_path

    def load(self) -> StaticMessageCatalog:
        catalog = StaticMessageCatalog()
        if not self.messages_path.exists():
            logger.warning("Message directory %s does not exist, catalog is empty", self.messages_path)
            return catalog

        for yaml_file in sorted(self.messages_path.glob("*.yaml")):
            with open(yaml_file, encoding="utf-8") as f:
                try:
                    data = yaml.safe_load(f)
                except yaml.YAMLError as e:
                    raise MetadataError(f"Invalid YAML in {yaml_file}: {e}") from e

            if data is None:
                continue
            if not isinstance(data, dict):
                raise MetadataError(f"{yaml_file} must contain a mapping of message codes")

            bundle = bundle_name_for(yaml_file)
            messages = flatten_messages(data)
            catalog.add_bundle(bundle, messages)
            logger.debug("Loaded %d messages from %s into bundle '%s'", len(messages), yaml_file, bundle)

        return catalog
