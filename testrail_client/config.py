"""
Configuration system for the TestRail client library.

Provides Pydantic-based configuration for credentials, HTTP timeouts and
logging, plus environment-driven settings for scripts and CI jobs.
"""

from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

API_PATH = "/index.php?/api/v2"


class TimeoutConfig(BaseModel):
    """HTTP timeout configuration."""

    connect: float = Field(default=10.0, description="Connection timeout in seconds")
    read: float = Field(default=30.0, description="Read timeout in seconds")
    write: float = Field(default=60.0, description="Write timeout in seconds")
    pool: float = Field(default=5.0, description="Pool timeout in seconds")

    def to_httpx_timeout(self) -> httpx.Timeout:
        """Convert to httpx.Timeout object."""
        return httpx.Timeout(
            connect=self.connect, read=self.read, write=self.write, pool=self.pool
        )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)"
    )
    logger_name: str = Field(default="testrail_client", description="Logger name")


class ClientConfig(BaseModel):
    """
    Complete configuration for the TestRail client.

    Credentials are fixed once the configuration exists (the model is
    frozen) and are turned into a static basic-auth header for every
    request. The host is used as given: a malformed host only shows up later
    as a NetworkError.

    ```python
    config = ClientConfig(
        host="https://example.testrail.io",
        email="qa-bot@example.com",
        password="api-key-from-my-settings",
        timeout=TimeoutConfig(read=120.0),  # large attachment downloads
    )
    ```

    Attributes:
        host: TestRail instance URL, without the ``/index.php`` suffix
        email: Account identifier used for basic auth
        password: Password or API key used for basic auth
        timeout: HTTP timeout configuration for all request phases
        logging: Logger name and level used by the client
        follow_redirects: Whether to automatically follow HTTP redirects
        verify_ssl: Whether to verify SSL certificates (disable only for testing)
        user_agent: Custom User-Agent header for request identification
    """

    host: str = Field(description="TestRail instance URL")
    email: str = Field(description="Account identifier for basic auth")
    password: SecretStr = Field(description="Password or API key for basic auth")
    timeout: TimeoutConfig = Field(default_factory=TimeoutConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    follow_redirects: bool = Field(default=True, description="Follow HTTP redirects")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    user_agent: Optional[str] = Field(
        default=None, description="Custom User-Agent header"
    )

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def api_url(self) -> str:
        """Root every endpoint path is appended to."""
        return f"{self.host.rstrip('/')}{API_PATH}"

    def basic_auth(self) -> httpx.BasicAuth:
        return httpx.BasicAuth(self.email, self.password.get_secret_value())


class TestRailSettings(BaseSettings):
    """
    Client settings read from the environment (or a ``.env`` file).

    Uses the same variable names as TestRail's own CLI tooling:
    ``TESTRAIL_HOST``, ``TESTRAIL_EMAIL`` and ``TESTRAIL_API_KEY``.
    """

    host: str = Field(description="TestRail instance URL")
    email: str = Field(description="Account identifier for basic auth")
    api_key: SecretStr = Field(description="API key (or password)")
    log_level: str = Field(default="INFO", description="Client log level")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")

    model_config = SettingsConfigDict(
        env_prefix="TESTRAIL_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def to_client_config(self) -> ClientConfig:
        return ClientConfig(
            host=self.host,
            email=self.email,
            password=self.api_key,
            logging=LoggingConfig(level=self.log_level),
            verify_ssl=self.verify_ssl,
        )
