"""Canonical node records for items tracked from external data sources."""
from .filters import NodeFilter
from .hierarchy import NodeHierarchy
from .ingest import NodeRecordDecoder
from .models import MalformedRecord, Node, NodeError, NodeKey, NodeType

__all__ = [
    "MalformedRecord",
    "Node",
    "NodeError",
    "NodeFilter",
    "NodeHierarchy",
    "NodeKey",
    "NodeRecordDecoder",
    "NodeType",
]
