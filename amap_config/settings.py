"""
Application Settings (Pydantic Settings).

Loads configuration from environment variables (.env file or system env).

Secrets:
- AMAP_API_KEY is the AMap web-service key. It is only ever read from the
  environment; MCP hosts usually pass it through the server's `env` block.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # ========================================================================
    # AMAP WEB SERVICE
    # ========================================================================
    AMAP_API_KEY: str = Field(default="", description="AMap web-service API key (required)")
    AMAP_BASE_URL: str = Field(
        default="https://restapi.amap.com",
        description="AMap REST API base URL",
    )
    AMAP_TIMEOUT_SECONDS: float | None = Field(
        default=None,
        description="Per-request timeout; unset keeps the httpx default",
        gt=0,
    )
    AMAP_ENFORCE_ENUMS: bool = Field(
        default=True,
        description="Reject enumerated parameters outside their allowed values",
    )

    # ========================================================================
    # MCP SERVER
    # ========================================================================
    MCP_SERVER_VERSION: str = Field(default="0.1.0")

    # ========================================================================
    # LOGGING
    # ========================================================================
    LOG_LEVEL: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    LOG_FORMAT: str = Field(default="json", pattern="^(json|text)$")
