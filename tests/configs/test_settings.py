"""
Unit tests for provider settings.

Dependencies: pytest, aws_adapters.configs
System role: Settings loading validation
"""

import pytest

from aws_adapters.configs.base import ProviderSettings
from aws_adapters.configs.environment import get_settings


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run from an empty directory with no AWS_PROVIDER_ variables set."""
    for name in (
        "REGION",
        "PROFILE",
        "ACCOUNT_ID",
        "PARTITION",
        "ENDPOINT_URL",
        "MAX_ATTEMPTS",
        "DEFAULT_TAGS",
        "IGNORE_TAG_KEYS",
        "IGNORE_TAG_KEY_PREFIXES",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(f"AWS_PROVIDER_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


class TestProviderSettings:
    """Test suite for ProviderSettings."""

    def test_defaults(self, clean_env):
        settings = ProviderSettings()

        assert settings.region == "us-east-1"
        assert settings.account_id is None
        assert settings.max_attempts == 5
        assert settings.default_tags == {}
        assert settings.ignore_tag_key_prefixes == []
        assert settings.log_level == "INFO"

    def test_reads_prefixed_environment(self, clean_env):
        clean_env.setenv("AWS_PROVIDER_REGION", "ap-southeast-2")
        clean_env.setenv("AWS_PROVIDER_MAX_ATTEMPTS", "9")
        clean_env.setenv("AWS_PROVIDER_DEFAULT_TAGS", '{"Env": "dev"}')
        clean_env.setenv("AWS_PROVIDER_IGNORE_TAG_KEYS", '["Secret"]')

        settings = ProviderSettings()

        assert settings.region == "ap-southeast-2"
        assert settings.max_attempts == 9
        assert settings.default_tags == {"Env": "dev"}
        assert settings.ignore_tag_keys == ["Secret"]

    def test_reads_dotenv_file(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("AWS_PROVIDER_ACCOUNT_ID=123456789012\n")

        assert ProviderSettings().account_id == "123456789012"

    def test_get_settings_is_cached(self, clean_env):
        assert get_settings() is get_settings()
