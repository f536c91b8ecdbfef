"""
AWS connection bundle.

Every adapter receives one AwsClient holding the boto3 service clients plus
the account context and tag policy that ARN construction and tag
reconciliation need.

Dependencies: boto3, botocore
System role: Outbound transport for every adapter
"""

import logging
from dataclasses import dataclass, field
from typing import Any

import boto3
from botocore.config import Config

from aws_adapters.configs.base import ProviderSettings
from aws_adapters.configs.environment import get_settings
from aws_adapters.utils.naming import ArnBuilder
from aws_adapters.utils.tags import DefaultTagsConfig, IgnoreTagsConfig

logger = logging.getLogger(__name__)


@dataclass
class AwsClient:
    """
    Connection context handed to every lifecycle call.

    Attributes:
        ec2: boto3 EC2 client
        opsworks: boto3 OpsWorks client
        partition: AWS partition of the region
        region: AWS region
        account_id: Caller's AWS account ID
        default_tags: Provider-wide default tags
        ignore_tags: Provider-wide ignored tag policy
    """
    ec2: Any
    opsworks: Any
    partition: str
    region: str
    account_id: str
    default_tags: DefaultTagsConfig = field(default_factory=DefaultTagsConfig)
    ignore_tags: IgnoreTagsConfig = field(default_factory=IgnoreTagsConfig)

    @property
    def arns(self) -> ArnBuilder:
        return ArnBuilder(
            partition=self.partition,
            region=self.region,
            account_id=self.account_id,
        )


def create_aws_client(settings: ProviderSettings | None = None) -> AwsClient:
    """
    Create the connection bundle from provider settings.

    Args:
        settings: Provider settings (defaults to get_settings())

    Returns:
        AwsClient: Ready-to-use connection bundle

    Raises:
        botocore.exceptions.ClientError: If the STS account lookup fails
    """
    settings = settings or get_settings()
    session = boto3.Session(profile_name=settings.profile, region_name=settings.region)

    client_kwargs: dict[str, Any] = {
        "config": Config(retries={"max_attempts": settings.max_attempts, "mode": "standard"}),
    }
    if settings.endpoint_url:
        client_kwargs["endpoint_url"] = settings.endpoint_url

    account_id = settings.account_id
    if not account_id:
        identity = session.client("sts", **client_kwargs).get_caller_identity()
        account_id = identity["Account"]

    partition = settings.partition or session.get_partition_for_region(settings.region)

    logger.debug(
        "Created AWS client for account %s in %s (%s)", account_id, settings.region, partition
    )

    return AwsClient(
        ec2=session.client("ec2", **client_kwargs),
        opsworks=session.client("opsworks", **client_kwargs),
        partition=partition,
        region=settings.region,
        account_id=account_id,
        default_tags=DefaultTagsConfig(tags=dict(settings.default_tags)),
        ignore_tags=IgnoreTagsConfig(
            keys=frozenset(settings.ignore_tag_keys),
            key_prefixes=frozenset(settings.ignore_tag_key_prefixes),
        ),
    )
