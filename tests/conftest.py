"""
Shared test fixtures and configuration for the entire test suite.

Provides: AwsClient with mocked boto3 clients, ClientError factory
Dependencies: pytest, botocore
System role: Test infrastructure and fixture management
"""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from aws_adapters.boundary.clients import AwsClient
from aws_adapters.utils.tags import DefaultTagsConfig, IgnoreTagsConfig


def make_client_error(code: str, operation: str = "DescribeLayers", message: str = "") -> ClientError:
    """Build a botocore ClientError with the given AWS error code."""
    return ClientError(
        {"Error": {"Code": code, "Message": message or code}},
        operation,
    )


@pytest.fixture
def client_error():
    """Return the ClientError factory."""
    return make_client_error


@pytest.fixture
def mock_opsworks():
    """
    Create mock OpsWorks client with empty default responses.

    Returns:
        MagicMock: Mocked boto3 OpsWorks client
    """
    conn = MagicMock()
    conn.create_layer.return_value = {"LayerId": "layer-1234"}
    conn.describe_elastic_load_balancers.return_value = {"ElasticLoadBalancers": []}
    conn.list_tags.return_value = {"Tags": {}}
    return conn


@pytest.fixture
def mock_ec2():
    """Create mock EC2 client."""
    return MagicMock()


@pytest.fixture
def aws_client(mock_opsworks, mock_ec2) -> AwsClient:
    """
    Create AwsClient around mocked service clients.

    Returns:
        AwsClient: Connection bundle for account 123456789012 in us-east-1
    """
    return AwsClient(
        ec2=mock_ec2,
        opsworks=mock_opsworks,
        partition="aws",
        region="us-east-1",
        account_id="123456789012",
    )


@pytest.fixture
def tagged_aws_client(mock_opsworks, mock_ec2) -> AwsClient:
    """AwsClient with provider default tags and an ignored tag prefix."""
    return AwsClient(
        ec2=mock_ec2,
        opsworks=mock_opsworks,
        partition="aws",
        region="us-east-1",
        account_id="123456789012",
        default_tags=DefaultTagsConfig(tags={"Project": "demo", "ManagedBy": "adapters"}),
        ignore_tags=IgnoreTagsConfig(key_prefixes=frozenset({"kubernetes.io/"})),
    )
