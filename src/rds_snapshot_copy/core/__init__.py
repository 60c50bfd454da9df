"""Core snapshot copy preparation modules."""

from .models import (
    DatabaseType,
    DatabaseInfo,
    KeyType,
    AliasInfo,
    KeyInfo,
    SnapshotDescriptor,
    ResolvedParameters,
)
from .aws import RDSManager, KMSManager, collect_pages
from .processors import build_alias_mapping, classify_key, classify_keys
from .resolver import ParameterResolver

__all__ = [
    # AWS Managers
    "RDSManager",
    "KMSManager",
    "collect_pages",
    # Models
    "DatabaseInfo",
    "AliasInfo",
    "KeyInfo",
    "SnapshotDescriptor",
    "ResolvedParameters",
    # Enums
    "DatabaseType",
    "KeyType",
    # Processors
    "build_alias_mapping",
    "classify_key",
    "classify_keys",
    "ParameterResolver",
]
