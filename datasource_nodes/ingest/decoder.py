"""Batch decoding of node records."""
from typing import Any, Iterable, List, Mapping, Optional
import logging

from ..config import load_settings
from ..models.exceptions import MalformedRecord
from ..models.node import Node

log = logging.getLogger(__name__)


class NodeRecordDecoder:
    """Decodes node records, raising on or skipping malformed ones."""

    def __init__(self, skip_malformed: Optional[bool] = None):
        """Initialize decoder.

        Args:
            skip_malformed: Drop malformed records instead of raising.
                Defaults to the DATASOURCE_NODES_SKIP_MALFORMED setting.
        """
        if skip_malformed is None:
            skip_malformed = load_settings().skip_malformed
        self.skip_malformed = skip_malformed
        self.rejected = 0

    def decode(self, record: Mapping[str, Any]) -> Node:
        """Decode a single record.

        Raises:
            MalformedRecord: If the record is malformed, regardless of policy
        """
        return Node.from_record(record)

    def decode_many(self, records: Iterable[Mapping[str, Any]]) -> List[Node]:
        """Decode a batch of records.

        Args:
            records: Encoded nodes

        Returns:
            List[Node]: Decoded nodes, in input order

        Raises:
            MalformedRecord: On the first malformed record when not skipping
        """
        nodes: List[Node] = []
        skipped = 0
        for index, record in enumerate(records):
            try:
                nodes.append(Node.from_record(record))
            except MalformedRecord as e:
                if not self.skip_malformed:
                    raise MalformedRecord(
                        f"Record {index}: {e}",
                        field=e.field,
                        expected=e.expected,
                        errors=e.errors
                    ) from e
                skipped += 1
                log.warning(
                    f"Skipping malformed node record {index}: "
                    f"field={e.field} expected={e.expected}"
                )

        self.rejected += skipped
        log.debug(f"Decoded {len(nodes)} node records, skipped {skipped}")
        return nodes
