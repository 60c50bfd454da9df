"""Simple data models for RDS instances and clusters."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Any

from rds_snapshot_copy.utils.exceptions import MalformedRecordError


class DatabaseType(Enum):
    """Kinds of RDS resource a snapshot can belong to."""
    INSTANCE = "instance"
    CLUSTER = "cluster"

    @classmethod
    def from_string(cls, value: str) -> "DatabaseType":
        """Parse a CLI value; ``database`` is accepted for instances."""
        normalized = value.strip().lower()
        if normalized == "database":
            return cls.INSTANCE
        return cls(normalized)


@dataclass
class DatabaseInfo:
    """Simple RDS resource information model."""
    identifier: str
    db_type: DatabaseType
    cluster_identifier: Optional[str] = None
    engine: str = ""
    status: str = ""

    @property
    def is_cluster_member(self) -> bool:
        return self.db_type is DatabaseType.INSTANCE and bool(self.cluster_identifier)

    @classmethod
    def from_aws_instance(cls, instance: Dict[str, Any]) -> "DatabaseInfo":
        """Create DatabaseInfo from a DescribeDBInstances item."""
        identifier = instance.get("DBInstanceIdentifier")
        if not identifier:
            raise MalformedRecordError("DBInstance", "DBInstanceIdentifier", instance)

        return cls(
            identifier=identifier,
            db_type=DatabaseType.INSTANCE,
            cluster_identifier=instance.get("DBClusterIdentifier"),
            engine=instance.get("Engine", ""),
            status=instance.get("DBInstanceStatus", ""),
        )

    @classmethod
    def from_aws_cluster(cls, cluster: Dict[str, Any]) -> "DatabaseInfo":
        """Create DatabaseInfo from a DescribeDBClusters item."""
        identifier = cluster.get("DBClusterIdentifier")
        if not identifier:
            raise MalformedRecordError("DBCluster", "DBClusterIdentifier", cluster)

        return cls(
            identifier=identifier,
            db_type=DatabaseType.CLUSTER,
            engine=cluster.get("Engine", ""),
            status=cluster.get("Status", ""),
        )
