"""Scenario files - a host state plus one event, described in JSON.

A scenario lists users, nodes, tags and shares, names the user of the
current session and describes a single event. Loading a scenario builds the
in-memory collaborators and the raw event the host would fire.

Example::

    {
      "session_user": "alice",
      "users": [{"uid": "alice", "display_name": "Alice"}],
      "nodes": [{"id": 7, "name": "b.txt", "owner": "alice",
                 "storage": "home::alice", "internal_path": "files/b.txt"}],
      "event": {"kind": "renamed", "source": 6, "target": 7}
    }
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema

from ..domain.value_objects import Node, Storage, SystemTag, User
from ..entity.file_entity import FileEntity
from ..events.dispatcher import GenericEvent, MapperEvent
from ..events.envelope import TAG_ASSIGN_CHANNEL, EventKind, NodePair
from ..exceptions import ScenarioError
from ..infrastructure.routing import RouteUrlGenerator
from ..infrastructure.session import StaticUserSession
from ..infrastructure.sharing import InMemoryShareManager
from ..infrastructure.storage import InMemoryRootFolder
from ..infrastructure.tags import InMemoryTagManager
from ..infrastructure.translation import CatalogTranslator
from .config import EntityConfig

logger = logging.getLogger(__name__)

SCENARIO_SCHEMA = {
    "type": "object",
    "required": ["event"],
    "properties": {
        "session_user": {"type": ["string", "null"]},
        "users": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["uid"],
                "properties": {
                    "uid": {"type": "string", "minLength": 1},
                    "display_name": {"type": "string"}
                }
            }
        },
        "nodes": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id", "name", "storage", "internal_path"],
                "properties": {
                    "id": {"type": "integer", "minimum": 0},
                    "name": {"type": "string"},
                    "owner": {"type": ["string", "null"]},
                    "storage": {"type": "string", "minLength": 1},
                    "internal_path": {"type": "string"},
                    "path": {"type": "string"},
                    "parent_id": {"type": ["integer", "null"]},
                    "is_folder": {"type": "boolean", "default": False}
                }
            }
        },
        "tags": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id", "name"],
                "properties": {
                    "id": {"type": ["string", "integer"]},
                    "name": {"type": "string"},
                    "user_visible": {"type": "boolean", "default": True},
                    "user_assignable": {"type": "boolean", "default": True}
                }
            }
        },
        "shares": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["node_id", "shared_by"],
                "properties": {
                    "node_id": {"type": "integer"},
                    "shared_by": {"type": "string", "minLength": 1},
                    "shared_with": {"type": ["string", "null"]}
                }
            }
        },
        "event": {
            "type": "object",
            "properties": {
                "kind": {
                    "type": "string",
                    "enum": [kind.name.lower() for kind in EventKind]
                },
                "channel": {"type": "string", "minLength": 1},
                "node": {"type": ["integer", "null"]},
                "source": {"type": ["integer", "null"]},
                "target": {"type": ["integer", "null"]},
                "object_type": {"type": "string"},
                "object_id": {"type": ["string", "integer"]},
                "tags": {
                    "type": "array",
                    "items": {"type": ["string", "integer"]}
                }
            },
            "oneOf": [
                {"required": ["kind"]},
                {"required": ["channel"]}
            ]
        }
    }
}


@dataclass
class Scenario:
    """Collaborators and the raw event described by a scenario file."""
    root: InMemoryRootFolder
    share_manager: InMemoryShareManager
    tag_manager: InMemoryTagManager
    session: StaticUserSession
    event_name: str
    event: Any
    users: Dict[str, User] = field(default_factory=dict)

    def build_entity(self, config: Optional[EntityConfig] = None) -> FileEntity:
        config = config or EntityConfig.default()
        return FileEntity(
            l10n=CatalogTranslator.for_locale(config.l10n_dir, config.locale),
            url_generator=RouteUrlGenerator(config.base_url),
            root=self.root,
            share_manager=self.share_manager,
            user_session=self.session,
            tag_manager=self.tag_manager,
            config=config,
        )


def validate_scenario_json(data: Any) -> List[str]:
    """Validate a scenario object.

    Returns:
        List of validation error messages
    """
    validator = jsonschema.Draft7Validator(SCENARIO_SCHEMA)
    errors = []
    for error in sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path]):
        path = " -> ".join(str(p) for p in error.absolute_path) if error.absolute_path else "root"
        errors.append(f"Validation error at {path}: {error.message}")
    return errors


def build_scenario(data: Dict[str, Any]) -> Scenario:
    """Build collaborators and the event from a scenario object.

    Raises:
        ScenarioError: If the scenario does not validate
    """
    errors = validate_scenario_json(data)
    if errors:
        raise ScenarioError("; ".join(errors))

    users = {
        entry["uid"]: User(entry["uid"], entry.get("display_name", ""))
        for entry in data.get("users", [])
    }

    def user_for(uid: Optional[str]) -> Optional[User]:
        if uid is None:
            return None
        return users.setdefault(uid, User(uid))

    root = InMemoryRootFolder()
    for entry in data.get("nodes", []):
        root.add(Node(
            id=entry["id"],
            name=entry["name"],
            owner=user_for(entry.get("owner")),
            storage=Storage(entry["storage"]),
            internal_path=entry["internal_path"],
            path=entry.get("path", ""),
            parent_id=entry.get("parent_id"),
            is_folder=entry.get("is_folder", False),
        ))

    tag_manager = InMemoryTagManager()
    for entry in data.get("tags", []):
        tag_manager.add(SystemTag(
            id=str(entry["id"]),
            name=entry["name"],
            user_visible=entry.get("user_visible", True),
            user_assignable=entry.get("user_assignable", True),
        ))

    share_manager = InMemoryShareManager(root)
    for entry in data.get("shares", []):
        share_manager.share(entry["node_id"], entry["shared_by"], entry.get("shared_with"))

    event_name, event = _build_event(data["event"], root)
    return Scenario(
        root=root,
        share_manager=share_manager,
        tag_manager=tag_manager,
        session=StaticUserSession(user_for(data.get("session_user"))),
        event_name=event_name,
        event=event,
        users=users,
    )


def _build_event(event_data: Dict[str, Any], root: InMemoryRootFolder):
    if "kind" in event_data:
        kind = EventKind[event_data["kind"].upper()]
        event_name = kind.channel
    else:
        event_name = event_data["channel"]
        kind = EventKind.from_channel(event_name)

    def node(key: str) -> Optional[Node]:
        node_id = event_data.get(key)
        return root.get_first(node_id) if node_id is not None else None

    if event_name == TAG_ASSIGN_CHANNEL or "object_id" in event_data:
        return event_name, MapperEvent(
            event=event_name,
            object_type=event_data.get("object_type", "files"),
            object_id=str(event_data.get("object_id", "")),
            tags=[str(tag) for tag in event_data.get("tags", [])],
        )
    if (kind is not None and kind.payload_type is NodePair) or "target" in event_data:
        return event_name, GenericEvent(subject=[node("source"), node("target")])
    return event_name, GenericEvent(subject=node("node"))


def load_scenario(scenario_path: Path) -> Scenario:
    """Load a scenario from a JSON file."""
    try:
        with open(scenario_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ScenarioError(f"{scenario_path}: invalid JSON at line {e.lineno}, column {e.colno}") from e
    except OSError as e:
        raise ScenarioError(f"Cannot read {scenario_path}: {e}") from e

    scenario = build_scenario(data)
    logger.info(f"Loaded scenario {scenario_path} with {len(scenario.root)} nodes")
    return scenario
