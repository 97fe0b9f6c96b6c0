"""In-memory node repository."""

import logging
from typing import Dict, Iterator, List, Optional

from ..domain.collaborators import NodeRepository
from ..domain.result import NotFoundError
from ..domain.value_objects import Node

logger = logging.getLogger(__name__)


class InMemoryRootFolder(NodeRepository):
    """
    Node registry keyed by object id.

    Registering two nodes with the same id records two locations of one
    object. ``get_by_id`` returns them in registration order.
    """

    def __init__(self) -> None:
        self._nodes: Dict[int, List[Node]] = {}
        self.available = True

    def add(self, node: Node) -> Node:
        self._nodes.setdefault(node.id, []).append(node)
        return node

    def remove(self, node_id: int) -> None:
        self._nodes.pop(node_id, None)

    def get_by_id(self, object_id: int) -> List[Node]:
        if not self.available:
            raise NotFoundError("Storage is not available")
        return list(self._nodes.get(object_id, []))

    def get_first(self, object_id: int) -> Optional[Node]:
        nodes = self._nodes.get(object_id)
        return nodes[0] if nodes else None

    def ancestors(self, node: Node) -> Iterator[Node]:
        """Walk parent folders from the closest one up."""
        seen = {node.id}
        parent_id = node.parent_id
        while parent_id is not None and parent_id not in seen:
            parent = self.get_first(parent_id)
            if parent is None:
                logger.debug(f"Parent {parent_id} of node {node.id} is not registered")
                return
            seen.add(parent_id)
            yield parent
            parent_id = parent.parent_id

    def __iter__(self) -> Iterator[Node]:
        for nodes in self._nodes.values():
            yield from nodes

    def __len__(self) -> int:
        return sum(len(nodes) for nodes in self._nodes.values())
