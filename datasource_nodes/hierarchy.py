"""Containment tree reconstruction from node records."""
from collections import deque
from typing import Dict, Iterable, List, Optional, Set
import logging

from .models.node import Node

log = logging.getLogger(__name__)


class NodeHierarchy:
    """Read-only view of one data source's content tree.

    Built purely from each node's ``parents`` chain; ancestors that were
    not supplied are skipped rather than looked up.
    """

    def __init__(self, nodes: Iterable[Node]):
        """Index nodes by ID.

        Args:
            nodes: Nodes of a single data source

        Raises:
            ValueError: If nodes come from more than one data source
        """
        self.data_source_id: Optional[str] = None
        self._nodes: Dict[str, Node] = {}
        self._children: Dict[str, List[str]] = {}

        for node in nodes:
            if self.data_source_id is None:
                self.data_source_id = node.data_source_id
            elif node.data_source_id != self.data_source_id:
                raise ValueError(
                    f"Node {node.node_id} belongs to data source "
                    f"{node.data_source_id}, expected {self.data_source_id}"
                )

            existing = self._nodes.get(node.node_id)
            if existing is not None:
                log.debug(f"Duplicate node {node.node_id}, keeping newest snapshot")
                if existing.timestamp > node.timestamp:
                    continue
            self._nodes[node.node_id] = node

        for node in self._nodes.values():
            if node.parent_id is not None:
                self._children.setdefault(node.parent_id, []).append(node.node_id)

        orphans = len(self.orphans())
        if orphans:
            log.debug(f"{orphans} nodes have a parent outside the hierarchy")

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    def get(self, node_id: str) -> Optional[Node]:
        return self._nodes.get(node_id)

    def parent_of(self, node: Node) -> Optional[Node]:
        """Direct parent of a node, None for roots and missing parents."""
        if node.parent_id is None:
            return None
        return self._nodes.get(node.parent_id)

    def children_of(self, node_id: str) -> List[Node]:
        """Direct children of a node, in insertion order."""
        return [self._nodes[child] for child in self._children.get(node_id, [])]

    def roots(self) -> List[Node]:
        return [node for node in self._nodes.values() if node.is_root]

    def orphans(self) -> List[Node]:
        """Non-root nodes whose direct parent was not supplied."""
        return [
            node for node in self._nodes.values()
            if node.parent_id is not None and node.parent_id not in self._nodes
        ]

    def ancestors(self, node: Node) -> List[Node]:
        """Resolved ancestors, nearest parent first.

        Args:
            node: Node to start from

        Returns:
            List[Node]: Known ancestors; unknown IDs and repeats are skipped
        """
        seen: Set[str] = {node.node_id}
        result: List[Node] = []
        for parent_id in node.parents:
            if parent_id in seen:
                continue
            seen.add(parent_id)
            parent = self._nodes.get(parent_id)
            if parent is not None:
                result.append(parent)
        return result

    def descendants(self, node_id: str) -> List[Node]:
        """All nodes below a node, breadth first.

        Args:
            node_id: ID of the subtree root

        Returns:
            List[Node]: Descendants, excluding the node itself
        """
        seen: Set[str] = {node_id}
        result: List[Node] = []
        queue = deque([node_id])
        while queue:
            current = queue.popleft()
            for child_id in self._children.get(current, []):
                if child_id in seen:
                    continue
                seen.add(child_id)
                result.append(self._nodes[child_id])
                queue.append(child_id)
        return result

    def path(self, node: Node) -> List[str]:
        """Titles from the outermost known ancestor down to the node."""
        titles = [ancestor.title for ancestor in reversed(self.ancestors(node))]
        titles.append(node.title)
        return titles
