"""Snapshot deduplication for nodes."""
from typing import Dict, Iterable, List

from ..models.node import Node, NodeKey


def latest_snapshots(nodes: Iterable[Node]) -> List[Node]:
    """Keep the newest snapshot of each logical item.

    Args:
        nodes: Nodes, possibly several snapshots per item

    Returns:
        List[Node]: One node per identity key, in first-seen order. On equal
            timestamps the later occurrence wins.
    """
    latest: Dict[NodeKey, Node] = {}

    for node in nodes:
        current = latest.get(node.key)
        if current is None or node.timestamp >= current.timestamp:
            latest[node.key] = node

    return list(latest.values())


def changed_nodes(previous: Iterable[Node], current: Iterable[Node]) -> List[Node]:
    """Find nodes that are new or differ from the previous sync pass.

    Args:
        previous: Snapshots from the earlier pass
        current: Snapshots from the latest pass

    Returns:
        List[Node]: Nodes of ``current`` that are new or changed
    """
    seen = {node.key: node for node in previous}
    return [node for node in current if seen.get(node.key) != node]
