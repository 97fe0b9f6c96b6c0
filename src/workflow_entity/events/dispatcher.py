"""
Event Dispatcher - the host side of event delivery.

The host fires raw events on string channels. ``GenericEvent`` carries a node
or a (source, target) pair as its subject, ``MapperEvent`` carries a tag
mapping. ``envelope_from_event`` turns either into an envelope the entity can
resolve.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Deque, Dict, List, Optional, Sequence, Tuple

from ..domain.value_objects import Node
from .envelope import EventEnvelope, NodePair, SingleNode, TagMapping, is_envelope

logger = logging.getLogger(__name__)

Listener = Callable[[str, Any], Any]


@dataclass
class GenericEvent:
    """A raw event whose subject is a node or a pair of nodes."""
    subject: Any = None
    arguments: Dict[str, Any] = field(default_factory=dict)


@dataclass
class MapperEvent:
    """A raw event describing tags being assigned to or removed from an object."""
    event: str
    object_type: str
    object_id: str
    tags: Sequence[str] = ()


def envelope_from_event(event: Any) -> Optional[EventEnvelope]:
    """Translate a raw host event into an envelope.

    Returns None for events that are neither generic nor mapper events; those
    are not meant for file entities at all. A generic event with a subject of
    an unexpected shape becomes an empty SingleNode so resolution fails
    cleanly later on.
    """
    if is_envelope(event):
        return event
    if isinstance(event, MapperEvent):
        return TagMapping(
            object_type=event.object_type,
            object_id=str(event.object_id),
            tag_ids=tuple(event.tags),
        )
    if isinstance(event, GenericEvent):
        subject = event.subject
        if isinstance(subject, (list, tuple)) and len(subject) == 2:
            return NodePair(source=subject[0], target=subject[1])
        if isinstance(subject, Node):
            return SingleNode(subject)
        return SingleNode(None)
    return None


@dataclass(frozen=True)
class DispatchRecord:
    """One delivered event, kept for inspection."""
    event_name: str
    event: Any
    listeners_notified: int
    timestamp: datetime = field(default_factory=datetime.now)


class EventDispatcher:
    """
    Synchronous channel based dispatcher.

    Listeners run in registration order. A failing listener is logged and
    does not keep the remaining listeners from seeing the event.
    """

    def __init__(self, max_history: int = 1000):
        self._listeners: Dict[str, List[Listener]] = {}
        self._history: Deque[DispatchRecord] = deque(maxlen=max_history)

    def add_listener(self, event_name: str, listener: Listener) -> None:
        """
        Register a listener for a channel.

        Args:
            event_name: The channel to listen on
            listener: Callable receiving ``(event_name, event)``
        """
        self._listeners.setdefault(event_name, []).append(listener)

    def remove_listener(self, event_name: str, listener: Listener) -> None:
        if event_name in self._listeners and listener in self._listeners[event_name]:
            self._listeners[event_name].remove(listener)

    def has_listeners(self, event_name: str) -> bool:
        return bool(self._listeners.get(event_name))

    def dispatch(self, event_name: str, event: Any) -> int:
        """
        Deliver an event to every listener of its channel.

        Returns:
            Number of listeners that handled the event without raising
        """
        notified = 0
        for listener in list(self._listeners.get(event_name, [])):
            try:
                listener(event_name, event)
                notified += 1
            except Exception as e:
                logger.warning(f"Listener {listener!r} failed on {event_name}: {e}")

        self._history.append(DispatchRecord(event_name, event, notified))
        return notified

    def history(self, event_name: Optional[str] = None) -> List[DispatchRecord]:
        """Recently dispatched events, oldest first."""
        if event_name is None:
            return list(self._history)
        return [record for record in self._history if record.event_name == event_name]

    def channels(self) -> Tuple[str, ...]:
        return tuple(name for name, listeners in self._listeners.items() if listeners)

    def clear(self) -> None:
        """Clear all listeners and history."""
        self._listeners.clear()
        self._history.clear()
