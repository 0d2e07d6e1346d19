"""Utility modules for datasource-nodes."""
from .dedup import changed_nodes, latest_snapshots

__all__ = ["changed_nodes", "latest_snapshots"]
