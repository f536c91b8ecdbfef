"""
EC2 data sources.

Exports: get_vpc_ipam_pool, VpcIpamPool, build_filters
"""

from aws_adapters.data_sources.ec2.filters import build_filters
from aws_adapters.data_sources.ec2.ipam_pool import VpcIpamPool, get_vpc_ipam_pool

__all__ = ["build_filters", "VpcIpamPool", "get_vpc_ipam_pool"]
