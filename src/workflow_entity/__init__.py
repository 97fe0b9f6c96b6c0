"""Workflow File Entity

Exposes filesystem events (create, write, rename, delete, touch, copy and tag
assignment) to a rule-based workflow engine.
"""

__version__ = "0.1.0"

from .entity.file_entity import FileEntity
from .events.envelope import (
    EventKind,
    NodePair,
    ResolvedContext,
    SingleNode,
    TagMapping,
)
from .events.catalog import EntityEvent
from .events.dispatcher import EventDispatcher, GenericEvent, MapperEvent
from .domain.result import InvalidPathError, NotFoundError, TagNotFoundError
from .domain.value_objects import Node, Storage, SystemTag, User
from .models.config import EntityConfig, load_config
from .exceptions import ConfigurationError, ScenarioError, WorkflowEntityError

__all__ = [
    # Entity
    "FileEntity",
    "EntityEvent",

    # Events
    "EventKind",
    "NodePair",
    "ResolvedContext",
    "SingleNode",
    "TagMapping",
    "EventDispatcher",
    "GenericEvent",
    "MapperEvent",

    # Domain
    "Node",
    "Storage",
    "SystemTag",
    "User",
    "NotFoundError",
    "InvalidPathError",
    "TagNotFoundError",

    # Configuration and errors
    "EntityConfig",
    "load_config",
    "ConfigurationError",
    "ScenarioError",
    "WorkflowEntityError",
]
