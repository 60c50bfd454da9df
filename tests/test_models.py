from datetime import datetime, timedelta, timezone

import pytest

from conftest import utc
from rds_snapshot_copy.core.models import (
    AliasInfo,
    DatabaseInfo,
    DatabaseType,
    KeyInfo,
    ResolvedParameters,
    SnapshotDescriptor,
)
from rds_snapshot_copy.utils.exceptions import MalformedRecordError


def test_descriptor_format():
    descriptor = SnapshotDescriptor("snap-1", utc(2023, 1, 2, 3, 4, 5))
    assert descriptor.format() == "snap-1|2023-01-02 03:04:05"


def test_descriptor_format_converts_to_utc():
    plus_ten = timezone(timedelta(hours=10))
    descriptor = SnapshotDescriptor("snap-1", datetime(2023, 1, 2, 13, 4, 5, 999, tzinfo=plus_ten))
    assert descriptor.format() == "snap-1|2023-01-02 03:04:05"


def test_descriptor_split_recovers_id_and_time():
    text = SnapshotDescriptor("snap-1", utc(2023, 1, 2, 3, 4, 5)).format()

    snapshot_id, timestamp = text.split("|")
    parsed = SnapshotDescriptor.parse(text)

    assert snapshot_id == "snap-1"
    assert datetime.strptime(timestamp, "%Y-%m-%d %H:%M:%S") == datetime(2023, 1, 2, 3, 4, 5)
    assert parsed == SnapshotDescriptor("snap-1", utc(2023, 1, 2, 3, 4, 5))


def test_parse_accepts_bare_id():
    assert SnapshotDescriptor.parse("rds:orders-db-2023") == SnapshotDescriptor("rds:orders-db-2023")


def test_snapshot_without_create_time_is_malformed():
    with pytest.raises(MalformedRecordError) as excinfo:
        SnapshotDescriptor.from_aws_snapshot({"DBClusterSnapshotIdentifier": "snap-1"})
    assert excinfo.value.field_name == "SnapshotCreateTime"


def test_snapshot_without_id_is_malformed():
    with pytest.raises(MalformedRecordError):
        SnapshotDescriptor.from_aws_snapshot(
            {"SnapshotCreateTime": utc(2023, 1, 1)}, "DBSnapshotIdentifier"
        )


def test_database_type_accepts_database_for_instances():
    assert DatabaseType.from_string("database") is DatabaseType.INSTANCE
    assert DatabaseType.from_string("Cluster") is DatabaseType.CLUSTER
    with pytest.raises(ValueError):
        DatabaseType.from_string("table")


def test_instance_cluster_membership():
    member = DatabaseInfo.from_aws_instance(
        {"DBInstanceIdentifier": "i-1", "DBClusterIdentifier": "c-1"}
    )
    standalone = DatabaseInfo.from_aws_instance({"DBInstanceIdentifier": "i-2"})

    assert member.is_cluster_member
    assert not standalone.is_cluster_member


def test_key_and_alias_records():
    assert KeyInfo.from_aws_key({"KeyId": "k1", "KeyArn": "arn"}).label == "k1"
    assert KeyInfo("k1", "alias/app").label == "alias/app"
    assert AliasInfo.from_aws_alias({"AliasName": "alias/x"}).has_target is False

    with pytest.raises(MalformedRecordError):
        KeyInfo.from_aws_key({"KeyArn": "arn"})


def test_resolved_parameters_output():
    params = ResolvedParameters("aurora-1", "k1", True, "snap-1|2023-01-02 03:04:05")

    assert params.snapshot_id == "snap-1"
    assert str(params) == "aurora-1 k1 true snap-1|2023-01-02 03:04:05"
    assert params.to_dict()["snapshot_id"] == "snap-1"
