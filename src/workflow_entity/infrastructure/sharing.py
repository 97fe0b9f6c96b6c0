"""In-memory share manager."""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Set

from ..domain.collaborators import ShareManager
from ..domain.value_objects import AccessList, Node
from .storage import InMemoryRootFolder

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Share:
    """A node shared by one user with another. ``shared_with`` None is a public link."""
    node_id: int
    shared_by: str
    shared_with: Optional[str] = None

    @property
    def is_link(self) -> bool:
        return self.shared_with is None


class InMemoryShareManager(ShareManager):
    """
    Computes access lists from registered shares.

    A share only grants access when its sharer had access already, either as
    the owner or through another share. With ``transitive`` the chain of
    reshares is followed and shares of ancestor folders count too; without it
    only the owner's direct shares of the node itself are considered.
    """

    def __init__(self, root: InMemoryRootFolder):
        self._root = root
        self._shares: Dict[int, List[Share]] = {}

    def share(self, node_id: int, shared_by: str, shared_with: Optional[str] = None) -> Share:
        share = Share(node_id=node_id, shared_by=shared_by, shared_with=shared_with)
        self._shares.setdefault(node_id, []).append(share)
        return share

    def shares_of(self, node_id: int) -> List[Share]:
        return list(self._shares.get(node_id, []))

    def get_access_list(self, node: Node, include_owner: bool = True, transitive: bool = True) -> AccessList:
        nodes = [node]
        if transitive:
            nodes.extend(self._root.ancestors(node))

        owners = {n.owner.uid for n in nodes if n.owner is not None}
        shares = [share for n in nodes for share in self._shares.get(n.id, [])]
        if not transitive:
            shares = [share for share in shares if share.shared_by in owners]

        holders: Set[str] = set(owners)
        public = False
        changed = True
        while changed:
            changed = False
            for share in shares:
                if share.shared_by not in holders:
                    continue
                if share.is_link:
                    public = True
                elif share.shared_with not in holders:
                    holders.add(share.shared_with)
                    changed = True

        users = holders if include_owner else holders - owners
        logger.debug(f"Access list of node {node.id}: {len(users)} users, public={public}")
        return AccessList(users=frozenset(users), public=public)
