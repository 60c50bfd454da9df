"""KMS Manager: lists keys and aliases and picks out customer managed keys."""

from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from typing import List

import boto3

from rds_snapshot_copy.core.aws.pagination import collect_pages
from rds_snapshot_copy.core.constants import AWS_MANAGED_ALIAS_PREFIX
from rds_snapshot_copy.core.models import AliasInfo, KeyInfo
from rds_snapshot_copy.core.processors.key_classifier import classify_keys
from rds_snapshot_copy.utils.logger import setup_logger


class KMSManager:
    """Read-only view of the KMS keys in one account and region."""

    def __init__(
        self,
        session: boto3.Session,
        region: str = None,
        client=None,
        aws_managed_prefix: str = AWS_MANAGED_ALIAS_PREFIX,
    ):
        """Initialize KMSManager."""
        self.session = session
        self.region = region or getattr(session, "region_name", None)
        self.kms_client = client or session.client("kms", region_name=self.region)
        self.aws_managed_prefix = aws_managed_prefix
        self.logger = setup_logger(__name__, "kms_manager.log")

    def list_keys(self) -> List[KeyInfo]:
        """Every key in the account, without aliases."""
        return [
            KeyInfo.from_aws_key(item)
            for item in collect_pages(self.kms_client, "list_keys", "Keys")
        ]

    def list_aliases(self) -> List[AliasInfo]:
        """Every alias in the account, including those without a target."""
        return [
            AliasInfo.from_aws_alias(item)
            for item in collect_pages(self.kms_client, "list_aliases", "Aliases")
        ]

    def list_customer_managed_keys(self) -> List[KeyInfo]:
        """Customer managed keys, each labelled with its alias when it has one.

        Keys and aliases are fetched side by side; classification starts once
        both listings are complete. If either listing fails, its error is
        raised as soon as it happens. The other listing is abandoned, but the
        interpreter still waits for its thread at exit.
        """
        executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="kms-list")
        try:
            keys_future = executor.submit(self.list_keys)
            aliases_future = executor.submit(self.list_aliases)

            done, _ = wait([keys_future, aliases_future], return_when=FIRST_EXCEPTION)
            for future in done:
                error = future.exception()
                if error is not None:
                    self.logger.error(f"Failed to list KMS keys and aliases: {error}")
                    raise error

            keys = keys_future.result()
            aliases = aliases_future.result()
        finally:
            # A still-running listing is abandoned here; its thread is joined at exit
            executor.shutdown(wait=False, cancel_futures=True)

        self.logger.info(f"Listed {len(keys)} key(s) and {len(aliases)} alias(es)")
        return classify_keys(keys, aliases, self.aws_managed_prefix)
