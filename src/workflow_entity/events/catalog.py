"""Event catalog - the events an entity offers for rule registration."""

from dataclasses import dataclass
from typing import Dict, List

from ..domain.collaborators import Translator
from .envelope import EventKind

EVENT_LABELS: Dict[EventKind, str] = {
    EventKind.CREATED: 'File created',
    EventKind.UPDATED: 'File updated',
    EventKind.RENAMED: 'File renamed',
    EventKind.DELETED: 'File deleted',
    EventKind.TOUCHED: 'File accessed',
    EventKind.COPIED: 'File copied',
    EventKind.TAG_ASSIGNED: 'Tag assigned',
}


@dataclass(frozen=True, slots=True)
class EntityEvent:
    """A localized label paired with the channel it is fired on."""
    display_name: str
    event_name: str

    def to_dict(self) -> Dict[str, str]:
        return {"display_name": self.display_name, "event_name": self.event_name}


def build_event_catalog(l10n: Translator) -> List[EntityEvent]:
    """Build one EntityEvent per EventKind, in declaration order."""
    return [
        EntityEvent(l10n.t(EVENT_LABELS[kind]), kind.channel)
        for kind in EventKind
    ]
