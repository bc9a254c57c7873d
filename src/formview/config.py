"""Runtime configuration for the tag environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got '{raw}'")


def _env_path(name: str) -> Path | None:
    raw = os.environ.get(name)
    if raw and raw.strip():
        return Path(raw.strip())
    return None


@dataclass
class FormViewConfig:
    """Settings shared by every request served from one tag environment.

    Attributes:
        default_locale: Locale used when a request carries none
        html_encoding: Whether values are HTML-encoded by default
        list_codec: Codec applied to list-rendered error messages
        messages_dir: Directory holding messages*.yaml bundles
        constraints_dir: Directory holding constraint metadata YAML files
    """

    default_locale: str = "en"
    html_encoding: bool = True
    list_codec: str = "HTML"
    messages_dir: Path | None = None
    constraints_dir: Path | None = None

    @classmethod
    def from_env(cls, base_path: Path | None = None) -> FormViewConfig:
        """Create config from environment variables.

        Resolution order for the metadata directories:
        1. FORMVIEW_MESSAGES_DIR / FORMVIEW_CONSTRAINTS_DIR env vars
        2. {base_path}/i18n and {base_path}/constraints when base_path is given
        3. None (empty catalog, no constraint metadata)
        """
        messages_dir = _env_path("FORMVIEW_MESSAGES_DIR")
        constraints_dir = _env_path("FORMVIEW_CONSTRAINTS_DIR")
        if base_path is not None:
            messages_dir = messages_dir or base_path / "i18n"
            constraints_dir = constraints_dir or base_path / "constraints"

        return cls(
            default_locale=os.environ.get("FORMVIEW_DEFAULT_LOCALE", "").strip() or "en",
            html_encoding=_env_bool("FORMVIEW_HTML_ENCODING", True),
            list_codec=os.environ.get("FORMVIEW_LIST_CODEC", "").strip() or "HTML",
            messages_dir=messages_dir,
            constraints_dir=constraints_dir,
        )
