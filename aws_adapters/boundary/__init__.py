"""
AWS boundary modules.

Exports: AwsClient, create_aws_client
"""

from .clients import AwsClient, create_aws_client

__all__ = ["AwsClient", "create_aws_client"]
