"""Listing operations: argument mapping onto the Etsy listing endpoints.

Each handler receives its validated request and performs exactly one call.
Optional fields are sent only when present, never as null.
"""

from typing import Any

from etsy_mcp.schemas.etsy.listings import (
    CreateListingRequest,
    DeleteListingRequest,
    GetListingImagesRequest,
    GetListingInventoryRequest,
    GetListingRequest,
    GetTrendingListingsRequest,
    SearchListingsRequest,
    UpdateListingInventoryRequest,
    UpdateListingRequest,
    UploadListingImageRequest,
)
from etsy_mcp.tools.registry import OperationDescriptor
from etsy_mcp.utils.etsy import EtsyClient


async def search_listings(request: SearchListingsRequest, client: EtsyClient) -> Any:
    params: dict[str, Any] = {
        "keywords": request.keywords,
        "limit": request.limit,
        "offset": request.offset,
    }
    params.update(
        request.model_dump(
            include={"min_price", "max_price", "sort_on", "sort_order"},
            exclude_none=True,
        )
    )
    return await client.get("/application/listings/active", params=params)


async def get_listing(request: GetListingRequest, client: EtsyClient) -> Any:
    params = {"includes": ",".join(request.includes)} if request.includes else {}
    return await client.get(f"/application/listings/{request.listing_id}", params=params)


async def get_listing_inventory(
    request: GetListingInventoryRequest, client: EtsyClient
) -> Any:
    return await client.get(f"/application/listings/{request.listing_id}/inventory")


async def get_listing_images(
    request: GetListingImagesRequest, client: EtsyClient
) -> Any:
    return await client.get(f"/application/listings/{request.listing_id}/images")


async def get_trending_listings(
    request: GetTrendingListingsRequest, client: EtsyClient
) -> Any:
    params = {"limit": request.limit, "offset": request.offset}
    return await client.get("/application/listings/trending", params=params)


async def create_listing(request: CreateListingRequest, client: EtsyClient) -> Any:
    data = request.model_dump(mode="json", exclude={"shop_id"}, exclude_none=True)
    return await client.post(f"/application/shops/{request.shop_id}/listings", json=data)


async def update_listing(request: UpdateListingRequest, client: EtsyClient) -> Any:
    data = request.model_dump(
        mode="json", exclude={"shop_id", "listing_id"}, exclude_none=True
    )
    return await client.patch(
        f"/application/shops/{request.shop_id}/listings/{request.listing_id}",
        json=data,
    )


async def delete_listing(request: DeleteListingRequest, client: EtsyClient) -> Any:
    await client.delete(f"/application/listings/{request.listing_id}")
    return {"success": True, "message": "Listing deleted successfully"}


async def update_listing_inventory(
    request: UpdateListingInventoryRequest, client: EtsyClient
) -> Any:
    data = request.model_dump(mode="json", exclude={"listing_id"}, exclude_none=True)
    return await client.put(
        f"/application/listings/{request.listing_id}/inventory", json=data
    )


async def upload_listing_image(
    request: UploadListingImageRequest, client: EtsyClient
) -> Any:
    # TODO: Etsy expects multipart/form-data with the image bytes; this sends the URL as JSON
    data: dict[str, Any] = {"image": request.image_url}
    data.update(request.model_dump(include={"rank", "alt_text"}, exclude_none=True))
    return await client.post(
        f"/application/shops/{request.shop_id}/listings/{request.listing_id}/images",
        json=data,
    )


LISTING_OPERATIONS = [
    OperationDescriptor(
        name="search_listings",
        method="GET",
        path="/application/listings/active",
        request_model=SearchListingsRequest,
        handler=search_listings,
        description=(
            "Search for active Etsy listings. "
            "Supports keyword search with various filters."
        ),
    ),
    OperationDescriptor(
        name="get_listing",
        method="GET",
        path="/application/listings/{listing_id}",
        request_model=GetListingRequest,
        handler=get_listing,
        description="Get detailed information about a specific Etsy listing by its ID.",
    ),
    OperationDescriptor(
        name="get_listing_inventory",
        method="GET",
        path="/application/listings/{listing_id}/inventory",
        request_model=GetListingInventoryRequest,
        handler=get_listing_inventory,
        description=(
            "Get inventory information for a listing, "
            "including available quantities and variations."
        ),
    ),
    OperationDescriptor(
        name="get_listing_images",
        method="GET",
        path="/application/listings/{listing_id}/images",
        request_model=GetListingImagesRequest,
        handler=get_listing_images,
        description="Get all images associated with a specific listing.",
    ),
    OperationDescriptor(
        name="get_trending_listings",
        method="GET",
        path="/application/listings/trending",
        request_model=GetTrendingListingsRequest,
        handler=get_trending_listings,
        description="Get current trending listings on Etsy.",
    ),
    OperationDescriptor(
        name="create_listing",
        method="POST",
        path="/application/shops/{shop_id}/listings",
        request_model=CreateListingRequest,
        handler=create_listing,
        requires_auth=True,
        description="Create a new listing in your Etsy shop. Requires OAuth access token.",
    ),
    OperationDescriptor(
        name="update_listing",
        method="PATCH",
        path="/application/shops/{shop_id}/listings/{listing_id}",
        request_model=UpdateListingRequest,
        handler=update_listing,
        requires_auth=True,
        description="Update an existing listing. Requires OAuth access token.",
    ),
    OperationDescriptor(
        name="delete_listing",
        method="DELETE",
        path="/application/listings/{listing_id}",
        request_model=DeleteListingRequest,
        handler=delete_listing,
        requires_auth=True,
        description="Delete a listing from your shop. Requires OAuth access token.",
    ),
    OperationDescriptor(
        name="update_listing_inventory",
        method="PUT",
        path="/application/listings/{listing_id}/inventory",
        request_model=UpdateListingInventoryRequest,
        handler=update_listing_inventory,
        requires_auth=True,
        description=(
            "Update inventory for a listing (quantities, prices, SKUs). "
            "Requires OAuth access token."
        ),
    ),
    OperationDescriptor(
        name="upload_listing_image",
        method="POST",
        path="/application/shops/{shop_id}/listings/{listing_id}/images",
        request_model=UploadListingImageRequest,
        handler=upload_listing_image,
        requires_auth=True,
        description="Upload an image to a listing. Requires OAuth access token.",
    ),
]
