"""
Tests for the client configuration system.

Validates defaults, immutability, URL construction and environment-driven
settings.
"""

import httpx
import pytest
from pydantic import SecretStr, ValidationError

from testrail_client.client import TestRailClient
from testrail_client.config import (
    API_PATH,
    ClientConfig,
    LoggingConfig,
    TestRailSettings,
    TimeoutConfig,
)


class TestTimeoutConfig:
    """Test timeout configuration."""

    def test_default_timeouts(self):
        """Test default timeout values."""
        config = TimeoutConfig()
        assert config.connect == 10.0
        assert config.read == 30.0
        assert config.write == 60.0
        assert config.pool == 5.0

    def test_to_httpx_timeout(self):
        """Test conversion to httpx.Timeout object."""
        config = TimeoutConfig(connect=3.0, read=120.0, write=10.0, pool=2.0)
        httpx_timeout = config.to_httpx_timeout()

        assert isinstance(httpx_timeout, httpx.Timeout)
        assert httpx_timeout.connect == 3.0
        assert httpx_timeout.read == 120.0
        assert httpx_timeout.write == 10.0
        assert httpx_timeout.pool == 2.0


class TestLoggingConfig:
    def test_defaults(self):
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.logger_name == "testrail_client"


class TestClientConfig:
    """Test the complete client configuration."""

    def test_minimal_config(self):
        """Only host and credentials are required."""
        config = ClientConfig(
            host="https://example.testrail.io", email="qa@example.com", password="key"
        )

        assert config.host == "https://example.testrail.io"
        assert config.email == "qa@example.com"
        assert isinstance(config.password, SecretStr)
        assert config.password.get_secret_value() == "key"
        assert isinstance(config.timeout, TimeoutConfig)
        assert isinstance(config.logging, LoggingConfig)
        assert config.follow_redirects is True
        assert config.verify_ssl is True
        assert config.user_agent is None

    def test_missing_credentials_rejected(self):
        with pytest.raises(ValidationError):
            ClientConfig(host="https://example.testrail.io")

    def test_unknown_fields_rejected(self):
        with pytest.raises(ValidationError):
            ClientConfig(
                host="https://example.testrail.io",
                email="qa@example.com",
                password="key",
                retries=3,
            )

    def test_config_is_frozen(self):
        config = ClientConfig(
            host="https://example.testrail.io", email="qa@example.com", password="key"
        )
        with pytest.raises(ValidationError):
            config.email = "someone-else@example.com"

    @pytest.mark.parametrize(
        "host",
        ["https://example.testrail.io", "https://example.testrail.io/"],
    )
    def test_api_url(self, host):
        """The API root is the host plus TestRail's query-string route."""
        config = ClientConfig(host=host, email="qa@example.com", password="key")
        assert config.api_url == "https://example.testrail.io/index.php?/api/v2"
        assert config.api_url.endswith(API_PATH)

    def test_password_hidden_from_repr(self):
        config = ClientConfig(
            host="https://example.testrail.io",
            email="qa@example.com",
            password="hunter2-api-key",
        )
        assert "hunter2" not in repr(config.password)
        assert "hunter2" not in str(config)

    def test_basic_auth(self):
        config = ClientConfig(
            host="https://example.testrail.io", email="qa@example.com", password="key"
        )
        assert isinstance(config.basic_auth(), httpx.BasicAuth)

    def test_config_serialization(self):
        config = ClientConfig(
            host="https://example.testrail.io",
            email="qa@example.com",
            password="key",
            timeout=TimeoutConfig(read=90.0),
            user_agent="nightly-sync/1.0",
        )

        config_dict = config.model_dump()
        assert config_dict["host"] == "https://example.testrail.io"
        assert config_dict["timeout"]["read"] == 90.0
        assert config_dict["user_agent"] == "nightly-sync/1.0"


class TestTestRailSettings:
    """Settings come from TESTRAIL_* environment variables."""

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("TESTRAIL_HOST", "https://env.testrail.io")
        monkeypatch.setenv("TESTRAIL_EMAIL", "env@example.com")
        monkeypatch.setenv("TESTRAIL_API_KEY", "env-key")
        monkeypatch.setenv("TESTRAIL_LOG_LEVEL", "DEBUG")

        settings = TestRailSettings()

        assert settings.host == "https://env.testrail.io"
        assert settings.email == "env@example.com"
        assert settings.api_key.get_secret_value() == "env-key"
        assert settings.log_level == "DEBUG"
        assert settings.verify_ssl is True

    def test_missing_environment_rejected(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        for name in ("TESTRAIL_HOST", "TESTRAIL_EMAIL", "TESTRAIL_API_KEY"):
            monkeypatch.delenv(name, raising=False)

        with pytest.raises(ValidationError):
            TestRailSettings()

    def test_to_client_config(self):
        settings = TestRailSettings(
            host="https://env.testrail.io",
            email="env@example.com",
            api_key="env-key",
            log_level="WARNING",
            verify_ssl=False,
        )

        config = settings.to_client_config()

        assert config.host == "https://env.testrail.io"
        assert config.email == "env@example.com"
        assert config.password.get_secret_value() == "env-key"
        assert config.logging.level == "WARNING"
        assert config.verify_ssl is False

    async def test_client_from_settings(self, monkeypatch):
        monkeypatch.setenv("TESTRAIL_HOST", "https://env.testrail.io")
        monkeypatch.setenv("TESTRAIL_EMAIL", "env@example.com")
        monkeypatch.setenv("TESTRAIL_API_KEY", "env-key")

        client = TestRailClient.from_settings()
        try:
            assert client.config.api_url == "https://env.testrail.io/index.php?/api/v2"
            assert client.config.email == "env@example.com"
        finally:
            await client.close()
