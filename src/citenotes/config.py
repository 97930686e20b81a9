"""Settings for note commands, loaded from YAML."""
from __future__ import annotations

import os
import string
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, field_validator

from .errors import InvalidArgumentError
from .template import DEFAULT_TITLE_TEMPLATE

DEFAULT_CONFIG_PATH = Path("citenotes.yaml")
CAPTURE_KEY_ENV = "CITENOTES_CAPTURE_KEY"


class Settings(BaseModel):
    note_title_template: str = DEFAULT_TITLE_TEMPLATE
    capture_key: Optional[str] = None
    notes_subdir: str = "references"
    log_level: str = "WARNING"

    @field_validator("capture_key")
    @classmethod
    def single_letter(cls, value: Optional[str]) -> Optional[str]:
        if value in (None, ""):
            return None
        if len(value) != 1 or value not in string.ascii_letters:
            raise ValueError("capture_key must be a single ASCII letter")
        return value

    @field_validator("log_level")
    @classmethod
    def upper_level(cls, value: str) -> str:
        return value.upper()


def load_settings(config_path: Optional[Path] = None) -> Settings:
    """Read settings from YAML, falling back to defaults when the file is absent."""
    path = config_path or DEFAULT_CONFIG_PATH
    data: Dict[str, Any] = {}
    if path.exists():
        try:
            loaded = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise InvalidArgumentError(f"Invalid YAML in config file {path}: {exc}") from exc
        if loaded is not None and not isinstance(loaded, dict):
            raise InvalidArgumentError(
                f"Config file {path} must contain a mapping, got {type(loaded).__name__}"
            )
        data = {str(key): value for key, value in (loaded or {}).items()}
    elif config_path is not None:
        raise FileNotFoundError(f"Config file not found: {path}")
    override = os.getenv(CAPTURE_KEY_ENV)
    if override:
        data["capture_key"] = override
    return Settings(**data)
