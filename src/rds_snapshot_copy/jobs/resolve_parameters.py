#!/usr/bin/env python3
"""
Resolve Parameters Job

Works out the database resource, the KMS key and the snapshot a copy should
use. Stages run strictly in order:

    resource -> key -> reuse existing snapshot? -> snapshot

Each stage takes an explicit value when one was given and otherwise asks the
operator to choose. Any failure stops the run; nothing partial is returned.
"""

from enum import Enum
from typing import Dict, List, Optional

from .base import BaseJob
from rds_snapshot_copy.core.aws.kms import KMSManager
from rds_snapshot_copy.core.aws.rds import RDSManager
from rds_snapshot_copy.core.constants import RESTORE_ATTRIBUTE
from rds_snapshot_copy.core.models import DatabaseType, ResolvedParameters
from rds_snapshot_copy.core.resolver import ParameterResolver
from rds_snapshot_copy.utils.config import ConfigManager
from rds_snapshot_copy.utils.prompt import TerminalPrompter, Prompter


class ResolutionStage(Enum):
    """Progress of a resolution run."""
    START = "start"
    RESOURCE_RESOLVED = "resource_resolved"
    KEY_RESOLVED = "key_resolved"
    REUSE_DECIDED = "reuse_decided"
    SNAPSHOT_RESOLVED = "snapshot_resolved"
    DONE = "done"


class ResolveParametersJob(BaseJob):
    """Job that resolves the parameters of a snapshot copy"""

    def __init__(
        self,
        config_manager: Optional[ConfigManager] = None,
        prompter: Optional[Prompter] = None,
        rds: Optional[RDSManager] = None,
        kms: Optional[KMSManager] = None,
        profile: Optional[str] = None,
        region: Optional[str] = None,
    ):
        super().__init__(config_manager, job_name="resolve_parameters")

        if rds is None or kms is None:
            session = self.create_aws_session(profile, region)
            region = region or session.region_name
            rds = rds or RDSManager(session, region)
            kms = kms or KMSManager(
                session,
                region,
                aws_managed_prefix=self.config_manager.get_aws_managed_prefix(),
            )

        self.rds = rds
        self.kms = kms
        self.resolver = ParameterResolver(rds, kms, prompter or TerminalPrompter())
        self.stage = ResolutionStage.START

    def _advance(self, stage: ResolutionStage, detail: str) -> None:
        self.stage = stage
        self.log(f"{stage.value}: {detail}")

    def execute(
        self,
        db_identifier: Optional[str] = None,
        kms_key_id: Optional[str] = None,
        db_type: DatabaseType = DatabaseType.INSTANCE,
        snapshot_id: Optional[str] = None,
        use_existing: Optional[bool] = None,
        **kwargs,
    ) -> ResolvedParameters:
        """
        Resolve the copy parameters.

        Args:
            db_identifier: Instance or cluster identifier, prompted for if absent
            kms_key_id: KMS key id, prompted for if absent
            db_type: Whether ``db_identifier`` names an instance or a cluster
            snapshot_id: Snapshot id, prompted for if absent
            use_existing: Answer to "use an existing snapshot", prompted for if None

        Returns:
            ResolvedParameters with every field set

        Raises:
            ResolutionError: nothing to choose from, a malformed API record,
                or the operator cancelled a prompt
            ClientError, BotoCoreError: an AWS call failed
        """
        self.stage = ResolutionStage.START
        self.log(f"Resolving snapshot copy parameters for a {db_type.value}")

        try:
            resource_id = self.resolver.resolve_resource_identifier(db_identifier, db_type)
            self._advance(ResolutionStage.RESOURCE_RESOLVED, resource_id)

            key_id = self.resolver.resolve_key_id(kms_key_id)
            self._advance(ResolutionStage.KEY_RESOLVED, key_id)

            reuse = self.resolver.resolve_reuse_existing_snapshot(use_existing)
            self._advance(ResolutionStage.REUSE_DECIDED, str(reuse))

            snapshot = self.resolver.resolve_snapshot_id(snapshot_id, resource_id, db_type)
            self._advance(ResolutionStage.SNAPSHOT_RESOLVED, snapshot)

        except Exception as e:
            self.log(
                f"Resolution stopped after stage '{self.stage.value}': {e}", level="error"
            )
            raise

        params = ResolvedParameters(
            resource_id=resource_id,
            kms_key_id=key_id,
            use_existing_snapshot=reuse,
            snapshot=snapshot,
        )
        self._advance(ResolutionStage.DONE, str(params))
        return params

    def sharing_status(
        self,
        params: ResolvedParameters,
        account_ids: List[str],
        db_type: DatabaseType = DatabaseType.INSTANCE,
    ) -> Dict[str, bool]:
        """Report which accounts can already restore the resolved snapshot."""
        attributes = self.rds.describe_snapshot_attributes(params.snapshot_id, db_type)
        allowed = set(attributes.get(RESTORE_ATTRIBUTE, []))
        status = {
            account_id: (account_id in allowed or "all" in allowed)
            for account_id in account_ids
        }
        self.log(
            f"Snapshot {params.snapshot_id} shared with "
            f"{sum(status.values())}/{len(status)} requested account(s)"
        )
        return status
