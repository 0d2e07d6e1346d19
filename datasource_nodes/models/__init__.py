"""Data models for data source nodes."""
from .exceptions import MalformedRecord, NodeError
from .node import Node, NodeKey, NodeType

__all__ = ["Node", "NodeKey", "NodeType", "MalformedRecord", "NodeError"]
