"""Etsy credential configuration."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from etsy_mcp.config.base import ETSY_API_BASE_URL, Settings
from etsy_mcp.utils.etsy import EtsyMCPError


class MissingCredentialError(EtsyMCPError):
    """The Etsy API key could not be resolved."""

    pass


class ServerConfig(BaseModel):
    """Explicit server configuration, e.g. as sent by a hosting platform.

    Accepts both snake_case and the camelCase keys used by MCP hosts
    (``apiKey``, ``shopId``, ``accessToken``).
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    api_key: str | None = Field(
        default=None,
        alias="apiKey",
        repr=False,
        description="Your Etsy API key (keystring) from the Etsy Developer Portal",
    )
    shop_id: str | None = Field(
        default=None,
        alias="shopId",
        description="Your Etsy shop ID (optional, for faster shop operations)",
    )
    access_token: str | None = Field(
        default=None,
        alias="accessToken",
        repr=False,
        description=(
            "OAuth access token for shop management features "
            "(optional, required for write operations)"
        ),
    )


class EtsyConfig(BaseModel):
    """Credentials for one server instance.

    Immutable: the transport client derives its headers from this once, so a
    credential change needs a new server instance.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str | None = Field(default=None, repr=False, description="API key")
    shop_id: str | None = Field(default=None, description="Default shop ID")
    access_token: str | None = Field(
        default=None, repr=False, description="OAuth bearer token"
    )
    base_url: str = Field(
        default=ETSY_API_BASE_URL, description="Base URL of the Etsy Open API"
    )

    @model_validator(mode="after")
    def _require_api_key(self) -> "EtsyConfig":
        # MissingCredentialError is not a ValueError, so pydantic lets it through
        if not self.api_key or not self.api_key.strip():
            raise MissingCredentialError(
                "ETSY_API_KEY is required. "
                "Provide it via config or environment variable."
            )
        return self

    @property
    def has_access_token(self) -> bool:
        """True if write operations can be authorized."""
        return bool(self.access_token)

    @classmethod
    def resolve(
        cls,
        config: ServerConfig | Mapping[str, Any] | None = None,
        env: Settings | None = None,
    ) -> "EtsyConfig":
        """Resolve credentials: explicit config first, then environment.

        Args:
            config: Explicit configuration (ServerConfig or plain mapping)
            env: Settings to fall back to (default: fresh Settings() from env/.env)

        Raises:
            MissingCredentialError: If no API key is found in either source
        """
        if isinstance(config, ServerConfig):
            explicit = config
        else:
            explicit = ServerConfig.model_validate(dict(config or {}))

        fallback = env if env is not None else Settings()

        return cls(
            api_key=explicit.api_key or fallback.api_key,
            shop_id=explicit.shop_id or fallback.shop_id,
            access_token=explicit.access_token or fallback.access_token,
            base_url=fallback.base_url,
        )
