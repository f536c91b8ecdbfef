"""
Provider settings.

Holds the connection and tag-policy settings shared by every adapter.

Dependencies: pydantic_settings
System role: Foundation for client construction
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProviderSettings(BaseSettings):
    """Settings for the AWS connection and provider-wide tag policy."""

    model_config = SettingsConfigDict(
        env_prefix="AWS_PROVIDER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    region: str = Field(
        default="us-east-1",
        description="AWS region used by every client",
    )
    profile: str | None = Field(
        default=None,
        description="Named profile from the shared credentials file",
    )
    account_id: str | None = Field(
        default=None,
        description="AWS account ID (looked up through STS when unset)",
    )
    partition: str | None = Field(
        default=None,
        description="AWS partition (derived from the region when unset)",
    )
    endpoint_url: str | None = Field(
        default=None,
        description="Custom endpoint for all service clients",
    )
    max_attempts: int = Field(
        default=5,
        description="Maximum attempts for the botocore standard retry mode",
    )
    default_tags: dict[str, str] = Field(
        default_factory=dict,
        description="Tags applied to every taggable resource",
    )
    ignore_tag_keys: list[str] = Field(
        default_factory=list,
        description="Tag keys that are never read or managed",
    )
    ignore_tag_key_prefixes: list[str] = Field(
        default_factory=list,
        description="Tag key prefixes that are never read or managed",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
