"""Configuration and scenario models.

``workflow_entity.models.scenario`` depends on the entity package and is
imported from there directly.
"""

from .config import (
    CONFIG_SCHEMA,
    EntityConfig,
    load_config,
    save_config,
    validate_config_json,
)

__all__ = [
    "CONFIG_SCHEMA",
    "EntityConfig",
    "load_config",
    "save_config",
    "validate_config_json",
]
