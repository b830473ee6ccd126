"""Shop and shop section tools for the Etsy MCP server."""

from fastmcp import FastMCP

from etsy_mcp.schemas.etsy.shops import ListingState
from etsy_mcp.tools.dispatcher import Dispatcher


def register_shop_tools(mcp: FastMCP, dispatcher: Dispatcher) -> None:
    """Register shop tools on the given MCP server.

    Args:
        mcp: The FastMCP server instance to register tools on
        dispatcher: Dispatcher bound to this server's credentials
    """

    @mcp.tool
    async def get_shop(shop_id: int) -> str:
        """Get information about an Etsy shop by shop ID.

        Args:
            shop_id: The numeric ID of the shop

        Returns:
            Shop JSON (title, announcement, currency, counts, policies, ...)
        """
        return await dispatcher.run("get_shop", shop_id=shop_id)

    @mcp.tool
    async def get_shop_listings(
        shop_id: int,
        limit: int = 25,
        offset: int = 0,
        state: ListingState = "active",
    ) -> str:
        """Get the listings of a specific shop.

        PURPOSE: Browse one shop's catalog.

        WHEN TO USE:
        - Reviewing your own or a competitor's catalog
        - Finding listing IDs for update_listing() or get_listing_inventory()

        WHEN NOT TO USE:
        - For marketplace-wide search → use search_listings()

        Args:
            shop_id: The numeric ID of the shop
            limit: Maximum number of results (default: 25, max: 100)
            offset: Number of results to skip (for pagination)
            state: Filter by listing state (active, inactive, sold_out, draft, expired)
        """
        return await dispatcher.run(
            "get_shop_listings",
            shop_id=shop_id,
            limit=limit,
            offset=offset,
            state=state,
        )

    @mcp.tool
    async def search_shops(shop_name: str, limit: int = 25, offset: int = 0) -> str:
        """Search for Etsy shops by shop name.

        Args:
            shop_name: The shop name to search for
            limit: Maximum number of results (default: 25, max: 100)
            offset: Number of results to skip (for pagination)
        """
        return await dispatcher.run(
            "search_shops", shop_name=shop_name, limit=limit, offset=offset
        )

    @mcp.tool
    async def get_shop_sections(shop_id: int) -> str:
        """Get all sections/categories for a specific shop."""
        return await dispatcher.run("get_shop_sections", shop_id=shop_id)

    @mcp.tool
    async def find_shops(
        location: str | None = None,
        limit: int = 25,
        offset: int = 0,
    ) -> str:
        """Find shops by location or other criteria.

        Args:
            location: Location to search for shops
            limit: Maximum number of results (default: 25, max: 100)
            offset: Number of results to skip (for pagination)
        """
        return await dispatcher.run(
            "find_shops", location=location, limit=limit, offset=offset
        )

    @mcp.tool
    async def create_shop_section(shop_id: int, title: str) -> str:
        """Create a new shop section/category. Requires OAuth access token.

        Args:
            shop_id: Your shop ID
            title: Section title
        """
        return await dispatcher.run("create_shop_section", shop_id=shop_id, title=title)

    @mcp.tool
    async def update_shop_section(shop_id: int, shop_section_id: int, title: str) -> str:
        """Update a shop section. Requires OAuth access token."""
        return await dispatcher.run(
            "update_shop_section",
            shop_id=shop_id,
            shop_section_id=shop_section_id,
            title=title,
        )

    @mcp.tool
    async def delete_shop_section(shop_id: int, shop_section_id: int) -> str:
        """Delete a shop section. Requires OAuth access token.

        Listings in the section are kept; they just lose their section.
        """
        return await dispatcher.run(
            "delete_shop_section", shop_id=shop_id, shop_section_id=shop_section_id
        )

    @mcp.tool
    async def update_shop(
        shop_id: int,
        title: str | None = None,
        announcement: str | None = None,
        sale_message: str | None = None,
        policy_welcome: str | None = None,
    ) -> str:
        """Update shop information (title, announcement, etc.). Requires OAuth access token.

        Args:
            shop_id: Your shop ID
            title: Shop title
            announcement: Shop announcement message
            sale_message: Message to buyers at checkout
            policy_welcome: Shop policies welcome message
        """
        return await dispatcher.run(
            "update_shop",
            shop_id=shop_id,
            title=title,
            announcement=announcement,
            sale_message=sale_message,
            policy_welcome=policy_welcome,
        )
