"""Host Collaborator Interfaces.

The entity never talks to storage, sharing, tagging or localization directly.
It depends on these interfaces, which the host implements. In-memory
implementations live in ``workflow_entity.infrastructure``.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

from .value_objects import AccessList, Node, Storage, SystemTag, User


class Translator(ABC):
    """Localization service."""

    @abstractmethod
    def t(self, text: str, args: Sequence[str] = ()) -> str:
        """Translate ``text`` and substitute ``%s`` placeholders with ``args`` in order."""
        pass


class NodeRepository(ABC):
    """Looks up nodes by object id."""

    @abstractmethod
    def get_by_id(self, object_id: int) -> List[Node]:
        """Return every node carrying ``object_id``; may be empty.

        Implementations may raise NotFoundError when the backing storage is
        unavailable.
        """
        pass


class ShareManager(ABC):
    """Computes who can access a node."""

    @abstractmethod
    def get_access_list(self, node: Node, include_owner: bool = True, transitive: bool = True) -> AccessList:
        """Return the users with access to ``node``.

        With ``transitive`` the computation follows reshares and shares of
        ancestor folders, which may be expensive.
        """
        pass


class TagManager(ABC):
    """System tag lookup."""

    @abstractmethod
    def get_tags_by_ids(self, tag_ids: Sequence[str]) -> List[SystemTag]:
        """Return the tags for ``tag_ids``.

        Raises:
            TagNotFoundError: If at least one id is unknown.
        """
        pass


class UserSession(ABC):
    """The user on whose behalf the current request runs."""

    @abstractmethod
    def get_user(self) -> Optional[User]:
        pass


class UrlGenerator(ABC):
    """Builds links into the host application."""

    @abstractmethod
    def link_to_route_absolute(self, route_name: str, parameters: Optional[Dict[str, Any]] = None) -> str:
        pass

    @abstractmethod
    def image_path(self, app: str, image: str) -> str:
        pass


class RuleMatcher(ABC):
    """The slice of the rule matcher an entity feeds."""

    @abstractmethod
    def set_entity_subject(self, entity: Any, subject: Any) -> None:
        pass

    @abstractmethod
    def set_file_info(self, storage: Storage, path: str) -> None:
        pass
