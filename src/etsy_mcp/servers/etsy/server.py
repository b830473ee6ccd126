"""FastMCP Server for the Etsy Open API.

Every server instance owns its credentials, HTTP client and dispatcher, so
several independent instances (e.g. with different stub transports in tests)
can coexist without global state.
"""

from collections.abc import Mapping
import logging
from typing import Any

from fastmcp import FastMCP
import httpx

from etsy_mcp.config.base import settings
from etsy_mcp.config.etsy import EtsyConfig, ServerConfig
from etsy_mcp.servers.etsy.operations.listings import LISTING_OPERATIONS
from etsy_mcp.servers.etsy.operations.shops import SHOP_OPERATIONS
from etsy_mcp.servers.etsy.prompts.seller import register_seller_prompts
from etsy_mcp.servers.etsy.resources.documents import register_seller_resources
from etsy_mcp.servers.etsy.tools.listings import register_listing_tools
from etsy_mcp.servers.etsy.tools.shops import register_shop_tools
from etsy_mcp.tools.dispatcher import Dispatcher
from etsy_mcp.tools.registry import OperationRegistry
from etsy_mcp.utils.etsy import EtsyClient

logger = logging.getLogger(__name__)

INSTRUCTIONS = """
MCP Server for the Etsy marketplace (Open API v3).

Read tools (API key only):
- search_listings, get_listing, get_listing_inventory, get_listing_images,
  get_trending_listings
- get_shop, get_shop_listings, search_shops, find_shops, get_shop_sections

Shop management tools (require an OAuth access token):
- create_listing, update_listing, delete_listing, update_listing_inventory,
  upload_listing_image
- create_shop_section, update_shop_section, delete_shop_section, update_shop

Every tool returns JSON text. Failures are returned as {"error": ..., "status": ...}.

Typical workflow:
1. search_shops or get_shop → find the shop
2. get_shop_listings → get listing IDs
3. get_listing / get_listing_inventory → details
4. update_listing / update_listing_inventory → changes (OAuth)
"""


def build_registry() -> OperationRegistry:
    """Registry with all listing and shop operations."""
    return OperationRegistry([*LISTING_OPERATIONS, *SHOP_OPERATIONS])


def create_server(
    config: ServerConfig | Mapping[str, Any] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastMCP:
    """Create an Etsy MCP server.

    Args:
        config: Explicit configuration; missing values fall back to ETSY_* env vars
        transport: Optional httpx transport for the Etsy client (tests)

    Returns:
        Configured FastMCP server

    Raises:
        MissingCredentialError: If no API key is configured
    """
    etsy_config = EtsyConfig.resolve(config)
    client = EtsyClient(etsy_config, transport=transport)
    registry = build_registry()
    dispatcher = Dispatcher(etsy_config, client, registry)

    mcp = FastMCP(name=settings.server_name, instructions=INSTRUCTIONS)

    register_listing_tools(mcp, dispatcher)
    register_shop_tools(mcp, dispatcher)
    register_seller_resources(mcp, registry)
    register_seller_prompts(mcp)

    logger.info(
        "Etsy MCP server ready: %d operations, write access %s",
        len(registry),
        "enabled" if etsy_config.has_access_token else "disabled (no access token)",
    )
    return mcp
