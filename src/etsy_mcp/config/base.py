"""Configuration for the Etsy MCP server."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Find project root (where .env is located)
# This module is in src/etsy_mcp/config/base.py
# Project root is 3 levels up
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

ETSY_API_BASE_URL = "https://openapi.etsy.com/v3"


class Settings(BaseSettings):
    """Global settings, loaded from environment variables or .env"""

    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        env_prefix="ETSY_",
        case_sensitive=False,
        extra="ignore",
    )

    # Credentials
    api_key: str | None = Field(
        default=None,
        description="Etsy API key (keystring) from the Etsy Developer Portal",
    )
    shop_id: str | None = Field(
        default=None,
        description="Etsy shop ID (optional, for faster shop operations)",
    )
    access_token: str | None = Field(
        default=None,
        description="OAuth access token (required for write operations)",
    )

    # Etsy Open API
    base_url: str = Field(
        default=ETSY_API_BASE_URL,
        description="Base URL of the Etsy Open API (v3)",
    )

    # Server
    server_name: str = Field(
        default="Etsy MCP Server", description="Name of the MCP Server"
    )
    log_level: str = Field(default="INFO", description="Root logging level")


# Singleton instance
settings = Settings()
