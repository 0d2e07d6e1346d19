"""Decoding of node records received from connectors."""
from .decoder import NodeRecordDecoder

__all__ = ["NodeRecordDecoder"]
