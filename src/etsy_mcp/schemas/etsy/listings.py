"""Request schemas for Etsy listing operations."""

from typing import Literal

from pydantic import ConfigDict, Field

from etsy_mcp.schemas.base.requests import EtsyRequest, PaginatedRequest

SortOn = Literal["created", "price", "updated", "score"]
SortOrder = Literal["asc", "desc", "ascending", "descending"]
ListingInclude = Literal["Shop", "Images", "User", "Translations", "Inventory"]
WhoMade = Literal["i_did", "someone_else", "collective"]

MAX_TAGS = 13
MAX_TITLE_LENGTH = 140


class SearchListingsRequest(PaginatedRequest):
    """Keyword search over active listings."""

    keywords: str = Field(description="Search keywords for finding listings")
    min_price: int | float | None = Field(
        default=None, description="Minimum price in the shop currency"
    )
    max_price: int | float | None = Field(
        default=None, description="Maximum price in the shop currency"
    )
    sort_on: SortOn | None = Field(default=None, description="Field to sort results on")
    sort_order: SortOrder | None = Field(default=None, description="Sort order")


class ListingRequest(EtsyRequest):
    """Request addressing a single listing."""

    listing_id: int = Field(description="The numeric ID of the listing")


class GetListingRequest(ListingRequest):
    """Fetch one listing, optionally with related data."""

    includes: list[ListingInclude] | None = Field(
        default=None, description="Additional data to include in the response"
    )


class GetListingInventoryRequest(ListingRequest):
    """Fetch the inventory of a listing."""


class GetListingImagesRequest(ListingRequest):
    """Fetch the images of a listing."""


class DeleteListingRequest(ListingRequest):
    """Delete a listing."""


class GetTrendingListingsRequest(PaginatedRequest):
    """Fetch trending listings."""


class CreateListingRequest(EtsyRequest):
    """Create a listing in a shop.

    Etsy accepts at most 13 tags and 140 title characters; both limits are
    enforced by Etsy, not here.
    """

    shop_id: int = Field(description="Your shop ID")
    quantity: int = Field(description="Available quantity")
    title: str = Field(description=f"Listing title (max {MAX_TITLE_LENGTH} characters)")
    description: str = Field(description="Item description")
    price: int | float = Field(description="Price in shop currency")
    who_made: WhoMade = Field(description="Who made this item")
    when_made: str = Field(
        description="When was it made (e.g., made_to_order, 2020_2023, 2010_2019)"
    )
    taxonomy_id: int = Field(description="Category taxonomy ID")
    shipping_profile_id: int | None = Field(
        default=None, description="Shipping profile ID (optional)"
    )
    shop_section_id: int | None = Field(
        default=None, description="Shop section ID (optional)"
    )
    tags: list[str] | None = Field(
        default=None, description=f"Array of tags (max {MAX_TAGS})"
    )


class UpdateListingRequest(EtsyRequest):
    """Update any subset of a listing's mutable fields."""

    shop_id: int = Field(description="Your shop ID")
    listing_id: int = Field(description="Listing ID to update")
    title: str | None = Field(default=None, description="New title")
    description: str | None = Field(default=None, description="New description")
    price: int | float | None = Field(default=None, description="New price")
    quantity: int | None = Field(default=None, description="New quantity")
    tags: list[str] | None = Field(default=None, description="New tags")
    shop_section_id: int | None = Field(default=None, description="Shop section ID")


class PropertyValue(EtsyRequest):
    """Variation property of an inventory product."""

    model_config = ConfigDict(extra="allow")

    property_id: int | None = None
    property_name: str | None = None
    scale_id: int | None = None
    value_ids: list[int] | None = None
    values: list[str] | None = None


class Offering(EtsyRequest):
    """Price/quantity offering of an inventory product."""

    model_config = ConfigDict(extra="allow")

    price: int | float | None = None
    quantity: int | None = None
    is_enabled: bool | None = None


class InventoryProduct(EtsyRequest):
    """One product variation with its offerings."""

    model_config = ConfigDict(extra="allow")

    sku: str | None = None
    property_values: list[PropertyValue] | None = None
    offerings: list[Offering] | None = None


class UpdateListingInventoryRequest(ListingRequest):
    """Replace the inventory (quantities, prices, SKUs) of a listing."""

    products: list[InventoryProduct] = Field(
        description="Array of product variations with offerings"
    )
    price_on_property: list[int] | None = Field(
        default=None, description="Property IDs that affect price"
    )
    quantity_on_property: list[int] | None = Field(
        default=None, description="Property IDs that affect quantity"
    )
    sku_on_property: list[int] | None = Field(
        default=None, description="Property IDs that affect SKU"
    )


class UploadListingImageRequest(EtsyRequest):
    """Attach an image (by URL) to a listing."""

    shop_id: int = Field(description="Your shop ID")
    listing_id: int = Field(description="Listing ID")
    image_url: str = Field(description="URL of the image to upload")
    rank: int | None = Field(
        default=None, description="Display order (1 = primary image)"
    )
    alt_text: str | None = Field(
        default=None, description="Alternative text for accessibility"
    )
