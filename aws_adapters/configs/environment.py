"""
Settings loader.

Loads provider settings once per process.
"""

from functools import lru_cache

from aws_adapters.configs.base import ProviderSettings


@lru_cache
def get_settings() -> ProviderSettings:
    """
    Get provider settings singleton.

    Environment variables (AWS_PROVIDER_*) and .env are read once.

    Returns:
        ProviderSettings: Provider settings instance
    """
    return ProviderSettings()
