"""RDS Manager: lists the resources and snapshots an operator can pick from."""

from typing import Dict, List

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from rds_snapshot_copy.core.aws.pagination import collect_pages
from rds_snapshot_copy.core.models import DatabaseInfo, DatabaseType, SnapshotDescriptor
from rds_snapshot_copy.utils.logger import setup_logger


class RDSManager:
    """Read-only view of the RDS resources in one account and region."""

    def __init__(self, session: boto3.Session, region: str = None, client=None):
        """Initialize RDSManager.

        Args:
            session: Session the client is created from
            region: Region override; defaults to the session's region
            client: Pre-built RDS client, used instead of creating one
        """
        self.session = session
        self.region = region or getattr(session, "region_name", None)
        self.rds_client = client or session.client("rds", region_name=self.region)
        self.logger = setup_logger(__name__, "rds_manager.log")

    def list_instances(self) -> List[str]:
        """Identifiers of standalone DB instances; cluster members are left out."""
        instances = [
            DatabaseInfo.from_aws_instance(item)
            for item in collect_pages(self.rds_client, "describe_db_instances", "DBInstances")
        ]
        standalone = [db.identifier for db in instances if not db.is_cluster_member]
        self.logger.info(
            f"Found {len(standalone)} standalone instance(s) "
            f"({len(instances) - len(standalone)} cluster member(s) skipped)"
        )
        return standalone

    def list_clusters(self) -> List[str]:
        """Identifiers of every DB cluster."""
        clusters = [
            DatabaseInfo.from_aws_cluster(item).identifier
            for item in collect_pages(self.rds_client, "describe_db_clusters", "DBClusters")
        ]
        self.logger.info(f"Found {len(clusters)} cluster(s)")
        return clusters

    def list_resources(self, db_type: DatabaseType) -> List[str]:
        if db_type is DatabaseType.CLUSTER:
            return self.list_clusters()
        return self.list_instances()

    def list_cluster_snapshots(self, cluster_id: str) -> List[str]:
        """Formatted descriptors for the snapshots of ``cluster_id``."""
        items = collect_pages(
            self.rds_client,
            "describe_db_cluster_snapshots",
            "DBClusterSnapshots",
            DBClusterIdentifier=cluster_id,
        )
        snapshots = [
            SnapshotDescriptor.from_aws_snapshot(item, "DBClusterSnapshotIdentifier").format()
            for item in items
        ]
        self.logger.info(f"Found {len(snapshots)} snapshot(s) for cluster {cluster_id}")
        return snapshots

    def list_instance_snapshots(self, instance_id: str) -> List[str]:
        """Formatted descriptors for the snapshots of ``instance_id``."""
        items = collect_pages(
            self.rds_client,
            "describe_db_snapshots",
            "DBSnapshots",
            DBInstanceIdentifier=instance_id,
        )
        snapshots = [
            SnapshotDescriptor.from_aws_snapshot(item, "DBSnapshotIdentifier").format()
            for item in items
        ]
        self.logger.info(f"Found {len(snapshots)} snapshot(s) for instance {instance_id}")
        return snapshots

    def list_snapshots(self, resource_id: str, db_type: DatabaseType) -> List[str]:
        if db_type is DatabaseType.INSTANCE:
            return self.list_instance_snapshots(resource_id)
        return self.list_cluster_snapshots(resource_id)

    def describe_snapshot_attributes(
        self, snapshot_id: str, db_type: DatabaseType = DatabaseType.INSTANCE
    ) -> Dict[str, List[str]]:
        """Map attribute name (e.g. ``restore``) to its values (e.g. account ids)."""
        try:
            if db_type is DatabaseType.CLUSTER:
                response = self.rds_client.describe_db_cluster_snapshot_attributes(
                    DBClusterSnapshotIdentifier=snapshot_id
                )
                result = response["DBClusterSnapshotAttributesResult"]
                attributes = result.get("DBClusterSnapshotAttributes", [])
            else:
                response = self.rds_client.describe_db_snapshot_attributes(
                    DBSnapshotIdentifier=snapshot_id
                )
                result = response["DBSnapshotAttributesResult"]
                attributes = result.get("DBSnapshotAttributes", [])
        except (ClientError, BotoCoreError) as e:
            self.logger.error(f"Error describing attributes of snapshot {snapshot_id}: {e}")
            raise

        return {
            attr["AttributeName"]: list(attr.get("AttributeValues", []))
            for attr in attributes
        }
