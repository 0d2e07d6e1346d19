"""Search-side filtering of nodes."""
from typing import Iterable, Iterator, List, Optional

from pydantic import BaseModel, Field

from .models.node import Node, NodeType


class NodeFilter(BaseModel):
    """Predicate over nodes, every set criterion must hold."""

    timestamp_gt: Optional[int] = Field(None, description="Only nodes modified after this time")
    timestamp_lt: Optional[int] = Field(None, description="Only nodes modified before this time")
    parents_in: Optional[List[str]] = Field(
        None,
        description="Only nodes that are, or sit below, one of these IDs"
    )
    parents_not: Optional[List[str]] = Field(
        None,
        description="Exclude nodes that are, or sit below, one of these IDs"
    )
    node_types: Optional[List[NodeType]] = Field(None, description="Allowed node types")

    def matches(self, node: Node) -> bool:
        """Check a node against the filter.

        A node counts as part of its own subtree for the parents criteria.
        """
        if self.timestamp_gt is not None and node.timestamp <= self.timestamp_gt:
            return False
        if self.timestamp_lt is not None and node.timestamp >= self.timestamp_lt:
            return False
        if self.node_types is not None and node.node_type not in self.node_types:
            return False

        lineage = {node.node_id, *node.parents}
        if self.parents_in is not None and lineage.isdisjoint(self.parents_in):
            return False
        if self.parents_not is not None and not lineage.isdisjoint(self.parents_not):
            return False
        return True

    def apply(self, nodes: Iterable[Node]) -> Iterator[Node]:
        return (node for node in nodes if self.matches(node))
