"""
OpsWorks resource tagging.

OpsWorks tags are plain dicts keyed by resource ARN; layers cannot be tagged
inline on create, so tags are applied with separate calls.
"""

import logging
from typing import Any

from aws_adapters.utils.tags import diff_tags, ignore_aws

logger = logging.getLogger(__name__)


def list_tags(conn: Any, arn: str) -> dict[str, str]:
    """
    List every tag on an OpsWorks resource, following pagination.

    Raises:
        botocore.exceptions.ClientError: If the call fails
    """
    tags: dict[str, str] = {}
    kwargs: dict[str, Any] = {"ResourceArn": arn}
    while True:
        response = conn.list_tags(**kwargs)
        tags.update(response.get("Tags") or {})
        next_token = response.get("NextToken")
        if not next_token:
            return tags
        kwargs["NextToken"] = next_token


def update_tags(
    conn: Any,
    arn: str,
    old_tags: dict[str, str] | None,
    new_tags: dict[str, str] | None,
) -> None:
    """
    Untag removed keys, then tag added or changed ones. AWS-reserved keys are left alone.

    Raises:
        botocore.exceptions.ClientError: If a call fails
    """
    removed, updated = diff_tags(ignore_aws(old_tags or {}), ignore_aws(new_tags or {}))

    if removed:
        logger.debug("Removing tags %s from %s", removed, arn)
        conn.untag_resource(ResourceArn=arn, TagKeys=removed)

    if updated:
        logger.debug("Tagging %s with %d tags", arn, len(updated))
        conn.tag_resource(ResourceArn=arn, Tags=updated)
