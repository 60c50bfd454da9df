"""Simple data models for RDS snapshot copy preparation."""

# Database models
from .database import (
    DatabaseType,
    DatabaseInfo,
)

# KMS models
from .key import (
    KeyType,
    AliasInfo,
    KeyInfo,
)

# Snapshot models
from .snapshot import SnapshotDescriptor

# Output
from .resolved import ResolvedParameters

__all__ = [
    # Database models
    "DatabaseType",
    "DatabaseInfo",
    # KMS models
    "KeyType",
    "AliasInfo",
    "KeyInfo",
    # Snapshot models
    "SnapshotDescriptor",
    # Output
    "ResolvedParameters",
]
