"""
Configuration module for the AWS adapters.

Provides type-safe provider settings loaded from environment variables.
"""

from aws_adapters.configs.base import ProviderSettings
from aws_adapters.configs.environment import get_settings
from aws_adapters.configs.constants import (
    AWS_TAG_PREFIX,
    OPSWORKS_FALSE_STRING,
    OPSWORKS_TRUE_STRING,
)

__all__ = [
    "ProviderSettings",
    "get_settings",
    "AWS_TAG_PREFIX",
    "OPSWORKS_TRUE_STRING",
    "OPSWORKS_FALSE_STRING",
]
