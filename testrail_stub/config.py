"""Configuration management using Pydantic Settings."""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class StubConfig(BaseSettings):
    """TestRail stub configuration with environment variable support."""

    # Core server settings
    host: str = Field(default="127.0.0.1", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")

    # Credentials accepted by the basic-auth check
    email: str = Field(
        default="admin@example.com", description="User email accepted by the stub"
    )
    api_key: SecretStr = Field(
        default=SecretStr("secret"),
        description="Password or API key accepted by the stub",
    )

    seed_data: bool = Field(
        default=True,
        description="Create a demo project, suite, section and cases at startup",
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern="^(DEBUG|INFO|WARNING|ERROR)$",
    )
    log_format: str = Field(
        default="json",
        description="Log format (json or console)",
        pattern="^(json|console)$",
    )

    enable_docs: bool = Field(
        default=True, description="Enable FastAPI automatic documentation"
    )

    model_config = SettingsConfigDict(
        env_prefix="TESTRAIL_STUB_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def get_config() -> StubConfig:
    """Get stub configuration instance."""
    return StubConfig()
