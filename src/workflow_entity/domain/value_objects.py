"""
Domain value objects for workflow entities.

These are the read-only handles the host hands to the entity: users, storages,
nodes and system tags. They are immutable and carry no behaviour beyond simple
derived properties.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Optional


@dataclass(frozen=True, slots=True)
class User:
    """An account known to the host."""
    uid: str
    display_name: str = ""

    def __post_init__(self) -> None:
        if not self.uid:
            raise ValueError("User id cannot be empty")
        if not self.display_name:
            object.__setattr__(self, 'display_name', self.uid)


@dataclass(frozen=True, slots=True)
class Storage:
    """A storage backend a node lives in."""
    storage_id: str

    def __str__(self) -> str:
        return self.storage_id


@dataclass(frozen=True, slots=True)
class Node:
    """
    Handle to a stored file or folder.

    Several nodes may share an ``id`` when the same object is reachable through
    more than one location (a shared folder mounted for two users, for example).
    """
    id: int
    name: str
    owner: Optional[User]
    storage: Storage
    internal_path: str
    path: str = ""
    parent_id: Optional[int] = None
    is_folder: bool = False

    def __post_init__(self) -> None:
        if not self.path:
            object.__setattr__(self, 'path', f"/{self.internal_path.lstrip('/')}")


@dataclass(frozen=True, slots=True)
class SystemTag:
    """A collaborative tag that can be assigned to any object."""
    id: str
    name: str
    user_visible: bool = True
    user_assignable: bool = True

    def is_user_visible(self) -> bool:
        return self.user_visible


@dataclass(frozen=True, slots=True)
class AccessList:
    """Effective access to a node as computed by the share manager."""
    users: FrozenSet[str] = field(default_factory=frozenset)
    public: bool = False
    remote: bool = False

    def __contains__(self, uid: object) -> bool:
        return uid in self.users
