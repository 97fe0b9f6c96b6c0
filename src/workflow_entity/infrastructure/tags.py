"""In-memory system tag manager."""

from typing import Dict, List, Sequence

from ..domain.collaborators import TagManager
from ..domain.result import TagNotFoundError
from ..domain.value_objects import SystemTag


class InMemoryTagManager(TagManager):
    """Holds system tags by id."""

    def __init__(self) -> None:
        self._tags: Dict[str, SystemTag] = {}

    def add(self, tag: SystemTag) -> SystemTag:
        self._tags[tag.id] = tag
        return tag

    def get_tags_by_ids(self, tag_ids: Sequence[str]) -> List[SystemTag]:
        tag_ids = [str(tag_id) for tag_id in tag_ids]
        missing = [tag_id for tag_id in tag_ids if tag_id not in self._tags]
        if missing:
            raise TagNotFoundError(f"Tags not found: {', '.join(missing)}", missing=missing)
        return [self._tags[tag_id] for tag_id in tag_ids]

    def __len__(self) -> int:
        return len(self._tags)
