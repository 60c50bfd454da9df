"""Resolve each copy parameter from an explicit value or an operator choice."""

from typing import Dict, List, Optional

from rds_snapshot_copy.core.aws.kms import KMSManager
from rds_snapshot_copy.core.aws.rds import RDSManager
from rds_snapshot_copy.core.constants import (
    KEY_PROMPT,
    RESOURCE_PROMPT,
    REUSE_PROMPT,
    SNAPSHOT_PROMPT,
)
from rds_snapshot_copy.core.models import DatabaseType, KeyInfo
from rds_snapshot_copy.utils.exceptions import AmbiguousChoiceError, EmptyCandidateSetError
from rds_snapshot_copy.utils.logger import setup_logger
from rds_snapshot_copy.utils.prompt import Prompter


class ParameterResolver:
    """Explicit values win; anything missing is listed and offered to the operator."""

    def __init__(self, rds: RDSManager, kms: KMSManager, prompter: Prompter):
        self.rds = rds
        self.kms = kms
        self.prompter = prompter
        self.logger = setup_logger(__name__, "resolver.log")

    def _choose(self, prompt_text: str, choices: List[str], what: str) -> str:
        if not choices:
            raise EmptyCandidateSetError(what)
        return self.prompter.choose(prompt_text, choices)

    def resolve_resource_identifier(
        self, explicit: Optional[str], db_type: DatabaseType
    ) -> str:
        if explicit:
            return explicit

        identifiers = self.rds.list_resources(db_type)
        resource_id = self._choose(RESOURCE_PROMPT, identifiers, f"{db_type.value}s")
        self.logger.info(f"Selected {db_type.value} {resource_id}")
        return resource_id

    @staticmethod
    def key_choices(keys: List[KeyInfo]) -> Dict[str, str]:
        """Map display label to key id, refusing labels shared by two keys."""
        choices: Dict[str, str] = {}
        for key in keys:
            if key.label in choices and choices[key.label] != key.key_id:
                raise AmbiguousChoiceError(key.label)
            choices[key.label] = key.key_id
        return choices

    def resolve_key_id(self, explicit: Optional[str]) -> str:
        if explicit:
            return explicit

        choices = self.key_choices(self.kms.list_customer_managed_keys())
        label = self._choose(KEY_PROMPT, list(choices), "customer managed KMS keys")
        self.logger.info(f"Selected KMS key {label} ({choices[label]})")
        return choices[label]

    def resolve_reuse_existing_snapshot(self, explicit: Optional[bool] = None) -> bool:
        if explicit is not None:
            return explicit
        return self.prompter.confirm(REUSE_PROMPT)

    def resolve_snapshot_id(
        self,
        explicit: Optional[str],
        resource_identifier: str,
        db_type: DatabaseType = DatabaseType.CLUSTER,
    ) -> str:
        """Return the explicit id, or the chosen ``"{id}|{timestamp}"`` descriptor."""
        if explicit:
            return explicit

        snapshots = self.rds.list_snapshots(resource_identifier, db_type)
        snapshot = self._choose(
            SNAPSHOT_PROMPT, snapshots, f"snapshots for {resource_identifier}"
        )
        self.logger.info(f"Selected snapshot {snapshot}")
        return snapshot
