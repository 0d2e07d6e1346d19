"""Node model for items tracked from an external data source."""
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, NamedTuple, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError, field_validator

from .exceptions import MalformedRecord

MAX_TIMESTAMP = 2 ** 64 - 1

_EXPECTED = {
    "data_source_id": "string",
    "node_id": "string",
    "node_type": "one of 'Document', 'Table', 'Folder'",
    "timestamp": f"integer between 0 and {MAX_TIMESTAMP}",
    "title": "string",
    "mime_type": "string",
    "parents": "list of strings",
}


class NodeType(str, Enum):
    """Classification of a data source item."""

    DOCUMENT = "Document"
    TABLE = "Table"
    FOLDER = "Folder"

    @property
    def is_leaf(self) -> bool:
        """Documents and tables carry content, folders only structure."""
        return self is not NodeType.FOLDER


class NodeKey(NamedTuple):
    """Global identity of a logical item."""

    data_source_id: str
    node_id: str


class Node(BaseModel):
    """One snapshot of an item in a data source's content tree.

    Two nodes are equal when every field is equal, ``parents`` included
    in order. Snapshots of the same logical item share a ``key`` but
    may differ in timestamp or metadata.

    ``parents`` runs from the nearest parent to the root and never
    contains the node's own id.

    Build nodes with ``Node.new``, which never fails, or decode them with
    ``from_record``/``from_json``. Calling ``Node(...)`` with keywords
    validates and raises ``pydantic.ValidationError`` on bad input.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    data_source_id: StrictStr = Field(description="ID of the owning data source")
    node_id: StrictStr = Field(description="ID of the item, unique within its data source")
    node_type: NodeType = Field(description="Classification of the item")
    timestamp: StrictInt = Field(
        ge=0,
        le=MAX_TIMESTAMP,
        description="Last modification time in milliseconds since epoch"
    )
    title: StrictStr = Field(description="Display name")
    mime_type: StrictStr = Field(description="Content type hint, empty for most folders")
    parents: Tuple[StrictStr, ...] = Field(
        description="Ancestor IDs, nearest parent first, root last"
    )

    @field_validator("node_type", mode="before")
    @classmethod
    def _variant_name(cls, value: Any) -> Any:
        if not isinstance(value, str):
            raise ValueError("node type must be given by its variant name")
        return value

    @field_validator("parents", mode="before")
    @classmethod
    def _ordered_parents(cls, value: Any) -> Any:
        if not isinstance(value, (list, tuple)):
            raise ValueError("parents must be an ordered list")
        return value

    @classmethod
    def new(
        cls,
        data_source_id: str,
        node_id: str,
        node_type: NodeType,
        timestamp: int,
        title: str,
        mime_type: str,
        parents: Iterable[str]
    ) -> "Node":
        """Build a node from connector metadata without validating it.

        Args:
            data_source_id: ID of the owning data source
            node_id: ID of the item within the data source
            node_type: Classification of the item
            timestamp: Last modification time
            title: Display name
            mime_type: Content type hint
            parents: Ancestor IDs, nearest parent first

        Returns:
            Node: The new node
        """
        return cls.model_construct(
            data_source_id=data_source_id,
            node_id=node_id,
            node_type=node_type,
            timestamp=timestamp,
            title=title,
            mime_type=mime_type,
            parents=tuple(parents),
        )

    @property
    def key(self) -> NodeKey:
        """Identity key shared by every snapshot of this item."""
        return NodeKey(self.data_source_id, self.node_id)

    @property
    def parent_id(self) -> Optional[str]:
        """ID of the direct parent, None for a root item."""
        return self.parents[0] if self.parents else None

    @property
    def is_root(self) -> bool:
        return not self.parents

    @property
    def is_leaf(self) -> bool:
        return self.node_type.is_leaf

    def same_item(self, other: "Node") -> bool:
        """Check whether both nodes are snapshots of the same logical item."""
        return self.key == other.key

    def to_record(self) -> Dict[str, Any]:
        """Encode the node as a plain record.

        Returns:
            Dict[str, Any]: One entry per field, node type as its variant name
        """
        return {
            "data_source_id": self.data_source_id,
            "node_id": self.node_id,
            "node_type": self.node_type.value,
            "timestamp": self.timestamp,
            "title": self.title,
            "mime_type": self.mime_type,
            "parents": list(self.parents),
        }

    def to_json(self) -> str:
        """Encode the node as a JSON object."""
        return self.model_dump_json()

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Node":
        """Decode a node from a plain record.

        Unknown keys are ignored.

        Args:
            record: Encoded node, as produced by ``to_record``

        Returns:
            Node: Decoded node

        Raises:
            MalformedRecord: If a field is missing or holds an invalid value
        """
        if not isinstance(record, Mapping):
            raise MalformedRecord(
                f"Node record must be a mapping, got {type(record).__name__}",
                expected="mapping"
            )
        try:
            return cls.model_validate(dict(record))
        except ValidationError as e:
            raise _malformed(e) from e

    @classmethod
    def from_json(cls, data: Union[str, bytes]) -> "Node":
        """Decode a node from a JSON object.

        Raises:
            MalformedRecord: If the JSON is invalid or the record is malformed
        """
        try:
            return cls.model_validate_json(data)
        except ValidationError as e:
            raise _malformed(e) from e


def _malformed(error: ValidationError) -> MalformedRecord:
    errors: List[Dict[str, Any]] = error.errors(include_url=False)
    first = errors[0]
    field = str(first["loc"][0]) if first["loc"] else None
    if field is None:
        return MalformedRecord(
            f"Malformed node record: {first['msg']}",
            expected="JSON object",
            errors=errors
        )
    expected = _EXPECTED.get(field, "valid value")
    return MalformedRecord(
        f"Malformed node record: field '{field}' expected {expected} ({first['msg']})",
        field=field,
        expected=expected,
        errors=errors
    )
