"""
Event envelopes - the payload shapes the file entity understands.

Every event kind is fired by the host on exactly one channel and carries one of
three payload shapes. The envelope of an event is never trusted to match its
kind: resolution checks the shape and reports a mismatch as NotFoundError.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Type, Union

from ..domain.result import NotFoundError, Result
from ..domain.value_objects import Node

FILES_NAMESPACE = '\\OCP\\Files::'
TAG_ASSIGN_CHANNEL = 'OCP\\SystemTag\\ISystemTagObjectMapper::assignTags'
FILES_OBJECT_TYPE = 'files'


@dataclass(frozen=True, slots=True)
class SingleNode:
    """Payload of create, write, delete and touch events."""
    node: Optional[Node]


@dataclass(frozen=True, slots=True)
class NodePair:
    """Payload of rename and copy events. The subject is always ``target``."""
    source: Optional[Node]
    target: Optional[Node]


@dataclass(frozen=True, slots=True)
class TagMapping:
    """Payload of tag assignment events."""
    object_type: str
    object_id: str
    tag_ids: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, 'tag_ids', tuple(str(tag_id) for tag_id in self.tag_ids))


EventEnvelope = Union[SingleNode, NodePair, TagMapping]
ENVELOPE_TYPES: Tuple[Type, ...] = (SingleNode, NodePair, TagMapping)


class EventKind(Enum):
    """Filesystem events the file entity reacts to, keyed by channel."""
    CREATED = FILES_NAMESPACE + 'postCreate'
    UPDATED = FILES_NAMESPACE + 'postWrite'
    RENAMED = FILES_NAMESPACE + 'postRename'
    DELETED = FILES_NAMESPACE + 'postDelete'
    TOUCHED = FILES_NAMESPACE + 'postTouch'
    COPIED = FILES_NAMESPACE + 'postCopy'
    TAG_ASSIGNED = TAG_ASSIGN_CHANNEL

    @property
    def channel(self) -> str:
        return self.value

    @property
    def payload_type(self) -> Type:
        return _PAYLOAD_TYPES[self]

    @classmethod
    def from_channel(cls, channel: str) -> Optional[EventKind]:
        """Map a channel identifier to its kind, or None for foreign channels."""
        try:
            return cls(channel)
        except ValueError:
            return None


_PAYLOAD_TYPES: Dict[EventKind, Type] = {
    EventKind.CREATED: SingleNode,
    EventKind.UPDATED: SingleNode,
    EventKind.RENAMED: NodePair,
    EventKind.DELETED: SingleNode,
    EventKind.TOUCHED: SingleNode,
    EventKind.COPIED: NodePair,
    EventKind.TAG_ASSIGNED: TagMapping,
}


def is_envelope(candidate: Any) -> bool:
    """Check whether ``candidate`` is one of the known payload shapes."""
    return isinstance(candidate, ENVELOPE_TYPES)


@dataclass
class ResolvedContext:
    """
    Everything the entity knows about one incoming event.

    A context is built per event and thrown away once the consumers are done
    with it. It caches the subject resolution so a rule matcher and an activity
    renderer looking at the same event share one lookup.
    """
    kind: Optional[EventKind]
    envelope: Any
    event_name: str = ""
    _subject: Optional[Result[Node, NotFoundError]] = field(default=None, init=False, repr=False)

    @classmethod
    def for_event(cls, event_name: Union[str, EventKind], envelope: Any) -> ResolvedContext:
        if isinstance(event_name, EventKind):
            return cls(kind=event_name, envelope=envelope, event_name=event_name.channel)
        return cls(kind=EventKind.from_channel(event_name), envelope=envelope, event_name=event_name)

    @property
    def is_recognized(self) -> bool:
        return is_envelope(self.envelope)

    @property
    def cached_subject(self) -> Optional[Result[Node, NotFoundError]]:
        return self._subject

    def remember_subject(self, result: Result[Node, NotFoundError]) -> Result[Node, NotFoundError]:
        self._subject = result
        return result
