"""Listing tools for the Etsy MCP server.

Read tools only need the API key. Write tools need an OAuth access token and
answer with an error object instead of calling Etsy when none is configured.
Every tool returns pretty-printed JSON text.
"""

from typing import Any

from fastmcp import FastMCP

from etsy_mcp.schemas.etsy.listings import ListingInclude, SortOn, SortOrder, WhoMade
from etsy_mcp.tools.dispatcher import Dispatcher


def register_listing_tools(mcp: FastMCP, dispatcher: Dispatcher) -> None:
    """Register listing tools on the given MCP server.

    Args:
        mcp: The FastMCP server instance to register tools on
        dispatcher: Dispatcher bound to this server's credentials
    """

    @mcp.tool
    async def search_listings(
        keywords: str,
        limit: int = 25,
        offset: int = 0,
        min_price: int | float | None = None,
        max_price: int | float | None = None,
        sort_on: SortOn | None = None,
        sort_order: SortOrder | None = None,
    ) -> str:
        """Search for active Etsy listings.

        PURPOSE: Keyword search over all active listings with price filters.

        WHEN TO USE:
        - User looks for products ("handmade jewelry under $50")
        - Market research: what competitors offer and at which prices
        - Finding listing IDs for get_listing()

        WHEN NOT TO USE:
        - For listings of one known shop → use get_shop_listings()

        Args:
            keywords: Search keywords for finding listings
            limit: Maximum number of results (default: 25, max: 100)
            offset: Number of results to skip (for pagination)
            min_price: Minimum price in the shop currency
            max_price: Maximum price in the shop currency
            sort_on: Field to sort results on (created, price, updated, score)
            sort_order: Sort order (asc, desc, ascending, descending)

        Returns:
            JSON with "count" and "results" (one page, no automatic paging)
        """
        return await dispatcher.run(
            "search_listings",
            keywords=keywords,
            limit=limit,
            offset=offset,
            min_price=min_price,
            max_price=max_price,
            sort_on=sort_on,
            sort_order=sort_order,
        )

    @mcp.tool
    async def get_listing(
        listing_id: int,
        includes: list[ListingInclude] | None = None,
    ) -> str:
        """Get detailed information about a specific Etsy listing by its ID.

        Args:
            listing_id: The numeric ID of the listing
            includes: Additional data to include (Shop, Images, User, Translations, Inventory)

        Returns:
            Listing JSON
        """
        return await dispatcher.run(
            "get_listing", listing_id=listing_id, includes=includes
        )

    @mcp.tool
    async def get_listing_inventory(listing_id: int) -> str:
        """Get inventory information for a listing, including available quantities and variations."""
        return await dispatcher.run("get_listing_inventory", listing_id=listing_id)

    @mcp.tool
    async def get_listing_images(listing_id: int) -> str:
        """Get all images associated with a specific listing."""
        return await dispatcher.run("get_listing_images", listing_id=listing_id)

    @mcp.tool
    async def get_trending_listings(limit: int = 25, offset: int = 0) -> str:
        """Get current trending listings on Etsy.

        Args:
            limit: Maximum number of results (default: 25, max: 100)
            offset: Number of results to skip (for pagination)
        """
        return await dispatcher.run(
            "get_trending_listings", limit=limit, offset=offset
        )

    @mcp.tool
    async def create_listing(
        shop_id: int,
        quantity: int,
        title: str,
        description: str,
        price: int | float,
        who_made: WhoMade,
        when_made: str,
        taxonomy_id: int,
        shipping_profile_id: int | None = None,
        shop_section_id: int | None = None,
        tags: list[str] | None = None,
    ) -> str:
        """Create a new listing in your Etsy shop. Requires OAuth access token.

        PURPOSE: Publish a new product (created as draft by Etsy).

        WHEN TO USE:
        - User wants to add a product to their shop
        - After drafting title/description/tags with the create_listing_guide prompt

        Args:
            shop_id: Your shop ID
            quantity: Available quantity
            title: Listing title (max 140 characters)
            description: Item description
            price: Price in shop currency
            who_made: Who made this item (i_did, someone_else, collective)
            when_made: When was it made (e.g., made_to_order, 2020_2025, 2010_2019)
            taxonomy_id: Category taxonomy ID
            shipping_profile_id: Shipping profile ID (optional)
            shop_section_id: Shop section ID (optional)
            tags: Array of tags (max 13)

        Returns:
            The created listing as JSON, or {"error": ...}
        """
        return await dispatcher.run(
            "create_listing",
            shop_id=shop_id,
            quantity=quantity,
            title=title,
            description=description,
            price=price,
            who_made=who_made,
            when_made=when_made,
            taxonomy_id=taxonomy_id,
            shipping_profile_id=shipping_profile_id,
            shop_section_id=shop_section_id,
            tags=tags,
        )

    @mcp.tool
    async def update_listing(
        shop_id: int,
        listing_id: int,
        title: str | None = None,
        description: str | None = None,
        price: int | float | None = None,
        quantity: int | None = None,
        tags: list[str] | None = None,
        shop_section_id: int | None = None,
    ) -> str:
        """Update an existing listing. Requires OAuth access token.

        Only the fields given are sent to Etsy; everything else stays unchanged.

        Args:
            shop_id: Your shop ID
            listing_id: Listing ID to update
            title: New title
            description: New description
            price: New price
            quantity: New quantity
            tags: New tags (replaces all existing tags)
            shop_section_id: Shop section ID
        """
        return await dispatcher.run(
            "update_listing",
            shop_id=shop_id,
            listing_id=listing_id,
            title=title,
            description=description,
            price=price,
            quantity=quantity,
            tags=tags,
            shop_section_id=shop_section_id,
        )

    @mcp.tool
    async def delete_listing(listing_id: int) -> str:
        """Delete a listing from your shop. Requires OAuth access token.

        WHEN NOT TO USE:
        - To pause sales temporarily → update_listing(quantity=0) or deactivate on Etsy
        """
        return await dispatcher.run("delete_listing", listing_id=listing_id)

    @mcp.tool
    async def update_listing_inventory(
        listing_id: int,
        products: list[dict[str, Any]],
        price_on_property: list[int] | None = None,
        quantity_on_property: list[int] | None = None,
        sku_on_property: list[int] | None = None,
    ) -> str:
        """Update inventory for a listing (quantities, prices, SKUs). Requires OAuth access token.

        Args:
            listing_id: Listing ID
            products: Product variations, each with "sku", "property_values"
                (property_id, property_name, scale_id, value_ids, values) and
                "offerings" (price, quantity, is_enabled)
            price_on_property: Property IDs that affect price
            quantity_on_property: Property IDs that affect quantity
            sku_on_property: Property IDs that affect SKU

        Example:
            >>> await get_listing_inventory(listing_id=123)  # read current products first
            >>> await update_listing_inventory(listing_id=123, products=[...])
        """
        return await dispatcher.run(
            "update_listing_inventory",
            listing_id=listing_id,
            products=products,
            price_on_property=price_on_property,
            quantity_on_property=quantity_on_property,
            sku_on_property=sku_on_property,
        )

    @mcp.tool
    async def upload_listing_image(
        shop_id: int,
        listing_id: int,
        image_url: str,
        rank: int | None = None,
        alt_text: str | None = None,
    ) -> str:
        """Upload an image to a listing. Requires OAuth access token.

        Args:
            shop_id: Your shop ID
            listing_id: Listing ID
            image_url: URL of the image to upload
            rank: Display order (1 = primary image)
            alt_text: Alternative text for accessibility
        """
        return await dispatcher.run(
            "upload_listing_image",
            shop_id=shop_id,
            listing_id=listing_id,
            image_url=image_url,
            rank=rank,
            alt_text=alt_text,
        )
