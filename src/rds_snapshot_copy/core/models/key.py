"""Simple data models for KMS keys and aliases."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Any

from rds_snapshot_copy.utils.exceptions import MalformedRecordError


class KeyType(Enum):
    """Who manages a KMS key."""
    AWS = "aws"
    CUSTOMER = "customer"


@dataclass(frozen=True)
class AliasInfo:
    """KMS alias and the key it points at, if any."""
    name: str
    target_key_id: Optional[str] = None

    @property
    def has_target(self) -> bool:
        return bool(self.target_key_id)

    def is_aws_managed(self, prefix: str) -> bool:
        return self.name.startswith(prefix)

    @classmethod
    def from_aws_alias(cls, alias: Dict[str, Any]) -> "AliasInfo":
        """Create AliasInfo from a ListAliases item."""
        name = alias.get("AliasName")
        if not name:
            raise MalformedRecordError("Alias", "AliasName", alias)

        return cls(name=name, target_key_id=alias.get("TargetKeyId") or None)


@dataclass(frozen=True)
class KeyInfo:
    """KMS key with the alias it is displayed under."""
    key_id: str
    alias: Optional[str] = None

    @property
    def label(self) -> str:
        return self.alias or self.key_id

    @classmethod
    def from_aws_key(cls, key: Dict[str, Any]) -> "KeyInfo":
        """Create KeyInfo from a ListKeys item."""
        key_id = key.get("KeyId")
        if not key_id:
            raise MalformedRecordError("Key", "KeyId", key)

        return cls(key_id=key_id)
