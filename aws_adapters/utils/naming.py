"""
ARN construction for AWS resources.

Follows pattern: arn:{partition}:{service}:{region}:{account}:{resource}
"""

import re
from dataclasses import dataclass

from aws_adapters.configs.constants import OPSWORKS_SERVICE

_ARN_PATTERN = re.compile(r"^arn:[a-z0-9-]+:[a-z0-9-]+:[a-z0-9-]*:(\d{12})?:.+$")


def validate_arn(value: str) -> None:
    """
    Check that a value looks like an ARN. The empty string is accepted.

    Raises:
        ValueError: If the value is not an ARN
    """
    if value and not _ARN_PATTERN.match(value):
        raise ValueError(f"{value!r} is an invalid ARN")


@dataclass
class ArnBuilder:
    """
    Builds ARNs for resources whose APIs do not return one on create.

    Attributes:
        partition: AWS partition (aws, aws-cn, aws-us-gov)
        region: AWS region
        account_id: AWS account ID
    """
    partition: str
    region: str
    account_id: str

    def arn(self, service: str, resource: str) -> str:
        """
        Generate an ARN.

        Args:
            service: Service namespace (e.g., 'opsworks')
            resource: Resource part (e.g., 'layer/1234')

        Returns:
            Formatted ARN
        """
        return f"arn:{self.partition}:{service}:{self.region}:{self.account_id}:{resource}"

    def opsworks_layer_arn(self, layer_id: str) -> str:
        """ARN of an OpsWorks layer."""
        return self.arn(OPSWORKS_SERVICE, f"layer/{layer_id}")
