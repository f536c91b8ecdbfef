"""
VPC IPAM pool lookup.

Queries DescribeIpamPools by pool ID and/or generic filters and projects the
first returned pool onto a VpcIpamPool result.

Dependencies: botocore
System role: aws_vpc_ipam_pool data source
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from botocore.exceptions import ClientError

from aws_adapters.boundary.clients import AwsClient
from aws_adapters.data_sources.ec2.filters import FilterInput, build_filters
from aws_adapters.errors import MalformedIdentifierError, ResourceApiError
from aws_adapters.utils.tags import ignore_aws, tags_from_key_value_list

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VpcIpamPool:
    """Projected IPAM pool."""
    id: str
    arn: str | None = None
    address_family: str | None = None
    allocation_default_netmask_length: int | None = None
    allocation_max_netmask_length: int | None = None
    allocation_min_netmask_length: int | None = None
    allocation_resource_tags: dict[str, str] = field(default_factory=dict)
    auto_import: bool | None = None
    aws_service: str | None = None
    description: str | None = None
    ipam_pool_id: str | None = None
    ipam_scope_id: str | None = None
    ipam_scope_type: str | None = None
    locale: str | None = None
    pool_depth: int | None = None
    publicly_advertisable: bool | None = None
    source_ipam_pool_id: str | None = None
    state: str | None = None
    tags: dict[str, str] = field(default_factory=dict)


def ipam_scope_id_from_arn(scope_arn: str | None) -> str:
    """
    Extract the scope ID from an IPAM scope ARN.

    arn:aws:ec2::123456789012:ipam-scope/ipam-scope-0abc -> ipam-scope-0abc

    Raises:
        MalformedIdentifierError: If the ARN has no '/'-separated scope segment
    """
    parts = (scope_arn or "").split("/")
    if len(parts) < 2:
        raise MalformedIdentifierError(
            f"IPAM scope ARN {scope_arn!r} has no scope ID segment", scope_arn
        )
    return parts[1]


def get_vpc_ipam_pool(
    client: AwsClient,
    ipam_pool_id: str | None = None,
    filters: FilterInput = None,
) -> VpcIpamPool | None:
    """
    Look up one IPAM pool.

    When several pools match, the first one in the order returned by the API
    is used.

    Args:
        client: Connection bundle
        ipam_pool_id: Restrict the query to this pool
        filters: Generic describe filters

    Returns:
        VpcIpamPool, or None when no pool matches

    Raises:
        ResourceApiError: If the describe call fails
        MalformedIdentifierError: If the pool's scope ARN cannot be split
    """
    request: dict[str, Any] = {}
    if ipam_pool_id:
        request["IpamPoolIds"] = [ipam_pool_id]

    api_filters = build_filters(filters)
    if api_filters:
        request["Filters"] = api_filters

    logger.debug("Reading IPAM pools: %s", request)
    try:
        output = client.ec2.describe_ipam_pools(**request)
    except ClientError as e:
        raise ResourceApiError(f"error reading IPAM pools: {e}", ipam_pool_id) from e

    pools = (output or {}).get("IpamPools") or []
    if not pools or pools[0] is None:
        logger.debug("No IPAM pool matched %s", request)
        return None

    if len(pools) > 1:
        logger.warning(
            "%d IPAM pools matched, using the first one (%s)",
            len(pools),
            pools[0].get("IpamPoolId"),
        )

    return flatten_ipam_pool(pools[0], client)


def flatten_ipam_pool(pool: dict[str, Any], client: AwsClient) -> VpcIpamPool:
    tags = ignore_aws(tags_from_key_value_list(pool.get("Tags")))

    return VpcIpamPool(
        id=pool["IpamPoolId"],
        arn=pool.get("IpamPoolArn"),
        address_family=pool.get("AddressFamily"),
        allocation_default_netmask_length=pool.get("AllocationDefaultNetmaskLength"),
        allocation_max_netmask_length=pool.get("AllocationMaxNetmaskLength"),
        allocation_min_netmask_length=pool.get("AllocationMinNetmaskLength"),
        allocation_resource_tags=tags_from_key_value_list(pool.get("AllocationResourceTags")),
        auto_import=pool.get("AutoImport"),
        aws_service=pool.get("AwsService"),
        description=pool.get("Description"),
        ipam_pool_id=pool["IpamPoolId"],
        ipam_scope_id=ipam_scope_id_from_arn(pool.get("IpamScopeArn")),
        ipam_scope_type=pool.get("IpamScopeType"),
        locale=pool.get("Locale"),
        pool_depth=pool.get("PoolDepth"),
        publicly_advertisable=pool.get("PubliclyAdvertisable"),
        source_ipam_pool_id=pool.get("SourceIpamPoolId"),
        state=pool.get("State"),
        tags=client.ignore_tags.ignore_config(tags),
    )
