"""Custom exceptions for data source nodes."""
from typing import Any, Dict, List, Optional


class NodeError(Exception):
    """Base exception for node operations."""
    pass


class MalformedRecord(NodeError, ValueError):
    """An encoded node record could not be decoded."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        expected: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None
    ):
        """Initialize the error.

        Args:
            message: Human readable description
            field: Name of the offending field, None when the whole record is wrong
            expected: What the field should have contained
            errors: Underlying validation errors, one dict per problem
        """
        super().__init__(message)
        self.field = field
        self.expected = expected
        self.errors = errors or []
