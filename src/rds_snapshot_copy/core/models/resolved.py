"""Resolved parameters handed to the snapshot copy step."""

from dataclasses import dataclass
from typing import Dict, Any

from .snapshot import SnapshotDescriptor


@dataclass(frozen=True)
class ResolvedParameters:
    """Everything the copy needs; every field is always set."""
    resource_id: str
    kms_key_id: str
    use_existing_snapshot: bool
    snapshot: str

    @property
    def snapshot_id(self) -> str:
        """Bare snapshot id, without any timestamp suffix."""
        return SnapshotDescriptor.parse(self.snapshot).snapshot_id

    def to_dict(self) -> Dict[str, Any]:
        return {
            "resource_id": self.resource_id,
            "kms_key_id": self.kms_key_id,
            "use_existing_snapshot": self.use_existing_snapshot,
            "snapshot": self.snapshot,
            "snapshot_id": self.snapshot_id,
        }

    def __str__(self) -> str:
        return (
            f"{self.resource_id} {self.kms_key_id} "
            f"{str(self.use_existing_snapshot).lower()} {self.snapshot}"
        )
