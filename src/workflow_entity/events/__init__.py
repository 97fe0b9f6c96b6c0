"""
Event System - envelopes, the event catalog and host-side dispatch.
"""

from .envelope import (
    FILES_NAMESPACE,
    FILES_OBJECT_TYPE,
    TAG_ASSIGN_CHANNEL,
    EventEnvelope,
    EventKind,
    NodePair,
    ResolvedContext,
    SingleNode,
    TagMapping,
    is_envelope,
)
from .catalog import EVENT_LABELS, EntityEvent, build_event_catalog
from .dispatcher import (
    DispatchRecord,
    EventDispatcher,
    GenericEvent,
    MapperEvent,
    envelope_from_event,
)

__all__ = [
    # Envelopes
    "FILES_NAMESPACE",
    "FILES_OBJECT_TYPE",
    "TAG_ASSIGN_CHANNEL",
    "EventEnvelope",
    "EventKind",
    "NodePair",
    "ResolvedContext",
    "SingleNode",
    "TagMapping",
    "is_envelope",
    # Catalog
    "EVENT_LABELS",
    "EntityEvent",
    "build_event_catalog",
    # Dispatch
    "DispatchRecord",
    "EventDispatcher",
    "GenericEvent",
    "MapperEvent",
    "envelope_from_event",
]
