# src/paper_invest/config/settings.py
"""Application configuration using pydantic-settings.
Includes Paper Invest API credentials, MCP transport, and logging settings.
"""

from typing import Literal, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.paper_invest.core.errors import ConfigurationError

DEFAULT_API_URL = "https://api.paperinvest.io/v1"


# Base configuration class with common settings
class BaseAppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


class PaperInvestConfig(BaseAppSettings):
    """Paper Invest REST API configuration."""

    api_url: str = Field(DEFAULT_API_URL, validation_alias="PAPER_INVEST_API_URL")
    api_key: Optional[str] = Field(None, validation_alias="PAPER_INVEST_API_KEY")
    timeout: float = Field(30.0, validation_alias="PAPER_INVEST_TIMEOUT")
    # Validity window used when the token carries no readable expiry
    token_ttl: int = Field(3600, validation_alias="PAPER_INVEST_TOKEN_TTL")
    single_flight: bool = Field(False, validation_alias="PAPER_INVEST_SINGLE_FLIGHT")


class MCPConfig(BaseAppSettings):
    transport: Literal["stdio", "http", "sse"] = Field(
        "stdio", validation_alias="MCP_TRANSPORT"
    )
    host: str = Field("127.0.0.1", validation_alias="MCP_HOST")
    port: int = Field(8000, validation_alias="MCP_PORT")


class LoggingConfig(BaseAppSettings):
    level: str = Field("INFO", validation_alias="LOG_LEVEL")


class Settings(BaseAppSettings):
    paper_invest: PaperInvestConfig = Field(default_factory=PaperInvestConfig)
    mcp: MCPConfig = Field(default_factory=MCPConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    # Override model_config to add nested delimiter
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    def require_api_key(self) -> str:
        """Return the API key or fail with a startup configuration error."""
        api_key = (self.paper_invest.api_key or "").strip()
        if not api_key:
            raise ConfigurationError(
                "PAPER_INVEST_API_KEY environment variable is required"
            )
        return api_key


def get_settings() -> Settings:
    """Helper to get a settings instance"""
    return Settings()
