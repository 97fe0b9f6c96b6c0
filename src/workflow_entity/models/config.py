"""Configuration model for workflow entity."""

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "object_type": {
            "type": "string",
            "minLength": 1,
            "description": "Object type a tag mapping must carry to resolve to a node"
        },
        "show_file_route": {
            "type": "string",
            "minLength": 1,
            "description": "Route used to link to a node"
        },
        "icon_app": {"type": "string", "minLength": 1},
        "icon_path": {"type": "string", "minLength": 1},
        "base_url": {
            "type": "string",
            "pattern": r"^https?://",
            "description": "Absolute base for generated links"
        },
        "locale": {
            "type": "string",
            "pattern": r"^[a-z]{2,3}(_[A-Z]{2})?$"
        },
        "l10n_dir": {
            "type": ["string", "null"],
            "description": "Directory holding <locale>.json translation files"
        },
        "log_level": {
            "type": "string",
            "enum": LOG_LEVELS
        }
    },
    "additionalProperties": False
}


@dataclass
class EntityConfig:
    """Settings of the file entity and its default collaborators."""
    object_type: str = "files"
    show_file_route: str = "files.viewcontroller.showFile"
    icon_app: str = "core"
    icon_path: str = "categories/files.svg"
    base_url: str = "http://localhost"
    locale: str = "en"
    l10n_dir: Optional[Path] = None
    log_level: str = "WARNING"

    @classmethod
    def default(cls) -> "EntityConfig":
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EntityConfig":
        errors = validate_config_json(data)
        if errors:
            raise ConfigurationError("; ".join(errors))

        known = {f.name for f in fields(cls)}
        kwargs = {key: value for key, value in data.items() if key in known}
        if kwargs.get("l10n_dir") is not None:
            kwargs["l10n_dir"] = Path(kwargs["l10n_dir"])
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        if self.l10n_dir is not None:
            data["l10n_dir"] = str(self.l10n_dir)
        return data


def validate_config_json(data: Any) -> List[str]:
    """Validate a configuration object.

    Returns:
        List of validation error messages
    """
    try:
        jsonschema.validate(data, CONFIG_SCHEMA)
        return []
    except jsonschema.ValidationError as e:
        path = " -> ".join(str(p) for p in e.absolute_path) if e.absolute_path else "root"
        return [f"Validation error at {path}: {e.message}"]


def load_config(config_path: Path) -> EntityConfig:
    """Load configuration from a JSON file."""
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"{config_path}: invalid JSON at line {e.lineno}, column {e.colno}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {config_path}: {e}") from e

    config = EntityConfig.from_dict(config_data)
    logger.info(f"Loaded configuration from {config_path}")
    return config


def save_config(config: EntityConfig, config_path: Path) -> None:
    """Save configuration to a JSON file."""
    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(config.to_dict(), f, indent=2)
