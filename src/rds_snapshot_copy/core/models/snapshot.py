"""Simple data models for RDS snapshots."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, Optional, Any

from rds_snapshot_copy.core.constants import DESCRIPTOR_SEPARATOR, SNAPSHOT_TIME_FORMAT
from rds_snapshot_copy.utils.exceptions import MalformedRecordError


@dataclass(frozen=True)
class SnapshotDescriptor:
    """Snapshot identifier with its creation time.

    Rendered as ``"{id}|{YYYY-MM-DD HH:MM:SS}"`` in UTC so the operator can
    tell snapshots apart by age while the id stays recoverable.
    """
    snapshot_id: str
    created_at: Optional[datetime] = None

    @property
    def created_at_utc(self) -> Optional[datetime]:
        if self.created_at is None:
            return None
        if self.created_at.tzinfo is None:
            return self.created_at.replace(tzinfo=timezone.utc)
        return self.created_at.astimezone(timezone.utc)

    def format(self) -> str:
        if self.created_at is None:
            return self.snapshot_id
        timestamp = self.created_at_utc.strftime(SNAPSHOT_TIME_FORMAT)
        return f"{self.snapshot_id}{DESCRIPTOR_SEPARATOR}{timestamp}"

    def __str__(self) -> str:
        return self.format()

    @classmethod
    def parse(cls, text: str) -> "SnapshotDescriptor":
        """Split a descriptor, or accept a bare snapshot id."""
        snapshot_id, separator, timestamp = text.partition(DESCRIPTOR_SEPARATOR)
        if not separator:
            return cls(snapshot_id=text)

        created_at = datetime.strptime(timestamp, SNAPSHOT_TIME_FORMAT).replace(
            tzinfo=timezone.utc
        )
        return cls(snapshot_id=snapshot_id, created_at=created_at)

    @classmethod
    def from_aws_snapshot(
        cls, snapshot: Dict[str, Any], id_field: str = "DBClusterSnapshotIdentifier"
    ) -> "SnapshotDescriptor":
        """Create a descriptor from a DescribeDBClusterSnapshots or DescribeDBSnapshots item."""
        snapshot_id = snapshot.get(id_field)
        if not snapshot_id:
            raise MalformedRecordError("Snapshot", id_field, snapshot)

        created_at = snapshot.get("SnapshotCreateTime")
        if created_at is None:
            raise MalformedRecordError("Snapshot", "SnapshotCreateTime", snapshot)

        return cls(snapshot_id=snapshot_id, created_at=created_at)
