"""Shared fixtures: in-memory stand-ins for the boto3 RDS and KMS clients."""

from datetime import datetime, timezone

import pytest
from botocore.exceptions import ClientError

from rds_snapshot_copy.core.aws.kms import KMSManager
from rds_snapshot_copy.core.aws.rds import RDSManager
from rds_snapshot_copy.utils.config import ConfigManager


def client_error(code="AccessDenied", operation="ListKeys"):
    return ClientError({"Error": {"Code": code, "Message": f"{code} for test"}}, operation)


class FakePaginator:
    def __init__(self, client, operation):
        self.client = client
        self.operation = operation

    def paginate(self, **params):
        self.client.calls.append((self.operation, params))
        hook = self.client.hooks.get(self.operation)
        if hook:
            hook()
        fail_at = self.client.failures.get(self.operation)
        for index, page in enumerate(self.client.pages.get(self.operation, [])):
            if fail_at is not None and fail_at[0] == index:
                raise fail_at[1]
            yield page
        if fail_at is not None and fail_at[0] >= len(self.client.pages.get(self.operation, [])):
            raise fail_at[1]


class FakeClient:
    """Serves canned pages from ``get_paginator`` and canned responses from other calls.

    ``failures`` maps an operation to ``(page_index, exception)``; ``hooks``
    maps an operation to a callable run before its first page.
    """

    def __init__(self, pages=None, responses=None, failures=None, hooks=None):
        self.pages = pages or {}
        self.responses = responses or {}
        self.failures = failures or {}
        self.hooks = hooks or {}
        self.calls = []

    def get_paginator(self, operation):
        return FakePaginator(self, operation)

    def __getattr__(self, name):
        if name not in self.responses:
            raise AttributeError(name)

        def call(**params):
            self.calls.append((name, params))
            response = self.responses[name]
            if isinstance(response, Exception):
                raise response
            return response

        return call


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


@pytest.fixture
def rds_client():
    return FakeClient(
        pages={
            "describe_db_instances": [
                {
                    "DBInstances": [
                        {"DBInstanceIdentifier": "orders-db", "Engine": "postgres"},
                        {
                            "DBInstanceIdentifier": "aurora-1-instance-1",
                            "DBClusterIdentifier": "aurora-1",
                            "Engine": "aurora-postgresql",
                        },
                    ]
                },
                {"DBInstances": [{"DBInstanceIdentifier": "billing-db", "Engine": "mysql"}]},
            ],
            "describe_db_clusters": [
                {"DBClusters": [{"DBClusterIdentifier": "aurora-1"}]},
                {"DBClusters": [{"DBClusterIdentifier": "aurora-2"}]},
            ],
            "describe_db_cluster_snapshots": [
                {
                    "DBClusterSnapshots": [
                        {
                            "DBClusterSnapshotIdentifier": "snap-1",
                            "SnapshotCreateTime": utc(2023, 1, 2, 3, 4, 5),
                        },
                        {
                            "DBClusterSnapshotIdentifier": "snap-2",
                            "SnapshotCreateTime": utc(2023, 2, 1, 0, 0, 0),
                        },
                    ]
                }
            ],
            "describe_db_snapshots": [
                {
                    "DBSnapshots": [
                        {
                            "DBSnapshotIdentifier": "rds:orders-db-2023-03-01",
                            "SnapshotCreateTime": utc(2023, 3, 1, 12, 0, 0),
                        }
                    ]
                }
            ],
        },
        responses={
            "describe_db_snapshot_attributes": {
                "DBSnapshotAttributesResult": {
                    "DBSnapshotIdentifier": "snap-1",
                    "DBSnapshotAttributes": [
                        {"AttributeName": "restore", "AttributeValues": ["111111111111"]}
                    ],
                }
            },
            "describe_db_cluster_snapshot_attributes": {
                "DBClusterSnapshotAttributesResult": {
                    "DBClusterSnapshotIdentifier": "snap-1",
                    "DBClusterSnapshotAttributes": [
                        {
                            "AttributeName": "restore",
                            "AttributeValues": ["111111111111", "222222222222"],
                        }
                    ],
                }
            },
        },
    )


@pytest.fixture
def kms_client():
    return FakeClient(
        pages={
            "list_keys": [
                {"Keys": [{"KeyId": "k-rds"}, {"KeyId": "k-app"}]},
                {"Keys": [{"KeyId": "k-bare"}]},
            ],
            "list_aliases": [
                {
                    "Aliases": [
                        {"AliasName": "alias/aws/rds", "TargetKeyId": "k-rds"},
                        {"AliasName": "alias/app-data", "TargetKeyId": "k-app"},
                    ]
                },
                {"Aliases": [{"AliasName": "alias/aws/dynamodb"}]},
            ],
        }
    )


@pytest.fixture
def rds_manager(rds_client):
    return RDSManager(None, "ap-southeast-2", client=rds_client)


@pytest.fixture
def kms_manager(kms_client):
    return KMSManager(None, "ap-southeast-2", client=kms_client)


@pytest.fixture
def config_manager(tmp_path, monkeypatch):
    for var in ("AWS_REGION", "AWS_PROFILE", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    return ConfigManager(tmp_path)
