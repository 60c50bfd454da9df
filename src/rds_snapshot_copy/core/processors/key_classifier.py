#!/usr/bin/env python3
"""Split KMS keys into AWS managed and customer managed, and name them.

A key counts as AWS managed when any alias pointing at it starts with the
managed prefix (``alias/aws`` by default). Only customer managed keys are
candidates for snapshot encryption.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from rds_snapshot_copy.core.constants import AWS_MANAGED_ALIAS_PREFIX
from rds_snapshot_copy.core.models import AliasInfo, KeyInfo, KeyType
from rds_snapshot_copy.utils.logger import setup_logger

logger = setup_logger(__name__, "key_classifier.log")


def _preferred_alias(
    current: Optional[AliasInfo], candidate: AliasInfo, prefix: str
) -> AliasInfo:
    """Pick the alias that represents a key, independent of listing order.

    An AWS managed alias always wins so the key is classified as managed;
    otherwise the lexicographically smallest name is kept.
    """
    if current is None:
        return candidate

    current_managed = current.is_aws_managed(prefix)
    candidate_managed = candidate.is_aws_managed(prefix)
    if current_managed != candidate_managed:
        return current if current_managed else candidate

    return candidate if candidate.name < current.name else current


def build_alias_mapping(
    aliases: Iterable[AliasInfo], prefix: str = AWS_MANAGED_ALIAS_PREFIX
) -> Dict[str, AliasInfo]:
    """Map target key id to the alias that represents it.

    Aliases with no target are left out and can never match a key.
    """
    mapping: Dict[str, AliasInfo] = {}
    skipped = 0

    for alias in aliases:
        if not alias.has_target:
            skipped += 1
            continue
        mapping[alias.target_key_id] = _preferred_alias(
            mapping.get(alias.target_key_id), alias, prefix
        )

    if skipped:
        logger.debug(f"Skipped {skipped} alias(es) without a target key")
    return mapping


def classify_key(
    key: KeyInfo,
    alias_mapping: Dict[str, AliasInfo],
    prefix: str = AWS_MANAGED_ALIAS_PREFIX,
) -> Tuple[KeyType, KeyInfo]:
    """Classify one key and attach its alias name, if it has one."""
    alias = alias_mapping.get(key.key_id)
    if alias is None:
        return KeyType.CUSTOMER, KeyInfo(key_id=key.key_id)

    key_type = KeyType.AWS if alias.is_aws_managed(prefix) else KeyType.CUSTOMER
    return key_type, KeyInfo(key_id=key.key_id, alias=alias.name)


def classify_keys(
    keys: Iterable[KeyInfo],
    aliases: Iterable[AliasInfo],
    prefix: str = AWS_MANAGED_ALIAS_PREFIX,
) -> List[KeyInfo]:
    """Return the customer managed keys, in input order, each id at most once."""
    alias_mapping = build_alias_mapping(aliases, prefix)

    customer_managed: List[KeyInfo] = []
    seen = set()
    aws_managed = 0

    for key in keys:
        if key.key_id in seen:
            continue
        seen.add(key.key_id)

        key_type, classified = classify_key(key, alias_mapping, prefix)
        if key_type is KeyType.AWS:
            aws_managed += 1
            continue
        customer_managed.append(classified)

    logger.info(
        f"Classified {len(seen)} key(s): {len(customer_managed)} customer managed, "
        f"{aws_managed} AWS managed"
    )
    return customer_managed
