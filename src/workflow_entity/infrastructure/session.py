"""Simple user session and rule matcher implementations."""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from ..domain.collaborators import RuleMatcher, UserSession
from ..domain.value_objects import Storage, User


class StaticUserSession(UserSession):
    """A session whose user is set explicitly; None means an anonymous or system request."""

    def __init__(self, user: Optional[User] = None):
        self._user = user

    def get_user(self) -> Optional[User]:
        return self._user

    def set_user(self, user: Optional[User]) -> None:
        self._user = user


@dataclass
class CapturingRuleMatcher(RuleMatcher):
    """Records what an entity hands over; used where no rule engine is attached."""
    subjects: List[Tuple[Any, Any]] = field(default_factory=list)
    file_info: Optional[Tuple[Storage, str]] = None

    def set_entity_subject(self, entity: Any, subject: Any) -> None:
        self.subjects.append((entity, subject))

    def set_file_info(self, storage: Storage, path: str) -> None:
        self.file_info = (storage, path)
