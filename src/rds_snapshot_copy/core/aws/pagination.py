"""Flatten boto3 paginated responses into a single list."""

from typing import Any, Dict, List

from botocore.exceptions import BotoCoreError, ClientError

from rds_snapshot_copy.utils.logger import setup_logger

logger = setup_logger(__name__, "pagination.log")


def collect_pages(client, operation: str, result_key: str, **params) -> List[Dict[str, Any]]:
    """Drain every page of ``operation`` and return the ``result_key`` items in order.

    Args:
        client: boto3 client exposing ``get_paginator``
        operation: Paginated API name, e.g. ``describe_db_instances``
        result_key: Page field holding the items, e.g. ``DBInstances``
        **params: Arguments passed to the paginator

    Returns:
        All items across pages, in service order

    Raises:
        ClientError, BotoCoreError: the first failing page aborts the
        collection; nothing gathered before it is returned.
    """
    items: List[Dict[str, Any]] = []
    pages = 0

    try:
        paginator = client.get_paginator(operation)
        for page in paginator.paginate(**params):
            pages += 1
            items.extend(page.get(result_key, []))
    except (ClientError, BotoCoreError) as e:
        logger.error(f"Error calling {operation} (page {pages + 1}): {e}")
        raise

    logger.debug(f"{operation}: collected {len(items)} {result_key} from {pages} page(s)")
    return items
