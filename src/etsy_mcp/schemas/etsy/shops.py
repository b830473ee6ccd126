"""Request schemas for Etsy shop and shop section operations."""

from typing import Literal

from pydantic import Field

from etsy_mcp.schemas.base.requests import EtsyRequest, PaginatedRequest

ListingState = Literal["active", "inactive", "sold_out", "draft", "expired"]


class ShopRequest(EtsyRequest):
    """Request addressing a single shop."""

    shop_id: int = Field(description="The numeric ID of the shop")


class GetShopRequest(ShopRequest):
    """Fetch one shop."""


class GetShopSectionsRequest(ShopRequest):
    """Fetch the sections of a shop."""


class GetShopListingsRequest(PaginatedRequest):
    """List the listings of a shop."""

    shop_id: int = Field(description="The numeric ID of the shop")
    state: ListingState = Field(
        default="active", description="Filter by listing state (default: active)"
    )


class SearchShopsRequest(PaginatedRequest):
    """Search shops by name."""

    shop_name: str = Field(description="The shop name to search for")


class FindShopsRequest(PaginatedRequest):
    """Find shops by location."""

    location: str | None = Field(
        default=None, description="Location to search for shops"
    )


class CreateShopSectionRequest(ShopRequest):
    """Create a shop section."""

    title: str = Field(description="Section title")


class UpdateShopSectionRequest(ShopRequest):
    """Rename a shop section."""

    shop_section_id: int = Field(description="Section ID to update")
    title: str = Field(description="New section title")


class DeleteShopSectionRequest(ShopRequest):
    """Delete a shop section."""

    shop_section_id: int = Field(description="Section ID to delete")


class UpdateShopRequest(ShopRequest):
    """Update shop information."""

    title: str | None = Field(default=None, description="Shop title")
    announcement: str | None = Field(
        default=None, description="Shop announcement message"
    )
    sale_message: str | None = Field(
        default=None, description="Message to buyers at checkout"
    )
    policy_welcome: str | None = Field(
        default=None, description="Shop policies welcome message"
    )
