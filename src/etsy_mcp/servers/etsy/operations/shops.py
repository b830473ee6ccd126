"""Shop and shop section operations."""

from typing import Any

from etsy_mcp.schemas.etsy.shops import (
    CreateShopSectionRequest,
    DeleteShopSectionRequest,
    FindShopsRequest,
    GetShopListingsRequest,
    GetShopRequest,
    GetShopSectionsRequest,
    SearchShopsRequest,
    UpdateShopRequest,
    UpdateShopSectionRequest,
)
from etsy_mcp.tools.registry import OperationDescriptor
from etsy_mcp.utils.etsy import EtsyClient


async def get_shop(request: GetShopRequest, client: EtsyClient) -> Any:
    return await client.get(f"/application/shops/{request.shop_id}")


async def get_shop_listings(request: GetShopListingsRequest, client: EtsyClient) -> Any:
    params = {
        "limit": request.limit,
        "offset": request.offset,
        "state": request.state,
    }
    return await client.get(
        f"/application/shops/{request.shop_id}/listings", params=params
    )


async def search_shops(request: SearchShopsRequest, client: EtsyClient) -> Any:
    params = {
        "shop_name": request.shop_name,
        "limit": request.limit,
        "offset": request.offset,
    }
    return await client.get("/application/shops", params=params)


async def get_shop_sections(request: GetShopSectionsRequest, client: EtsyClient) -> Any:
    return await client.get(f"/application/shops/{request.shop_id}/sections")


async def find_shops(request: FindShopsRequest, client: EtsyClient) -> Any:
    params: dict[str, Any] = {"limit": request.limit, "offset": request.offset}
    if request.location:
        params["location"] = request.location
    return await client.get("/application/shops", params=params)


async def create_shop_section(
    request: CreateShopSectionRequest, client: EtsyClient
) -> Any:
    return await client.post(
        f"/application/shops/{request.shop_id}/sections",
        json={"title": request.title},
    )


async def update_shop_section(
    request: UpdateShopSectionRequest, client: EtsyClient
) -> Any:
    return await client.put(
        f"/application/shops/{request.shop_id}/sections/{request.shop_section_id}",
        json={"title": request.title},
    )


async def delete_shop_section(
    request: DeleteShopSectionRequest, client: EtsyClient
) -> Any:
    await client.delete(
        f"/application/shops/{request.shop_id}/sections/{request.shop_section_id}"
    )
    return {"success": True, "message": "Shop section deleted successfully"}


async def update_shop(request: UpdateShopRequest, client: EtsyClient) -> Any:
    data = request.model_dump(exclude={"shop_id"}, exclude_none=True)
    return await client.put(f"/application/shops/{request.shop_id}", json=data)


SHOP_OPERATIONS = [
    OperationDescriptor(
        name="get_shop",
        method="GET",
        path="/application/shops/{shop_id}",
        request_model=GetShopRequest,
        handler=get_shop,
        description="Get information about an Etsy shop by shop ID.",
    ),
    OperationDescriptor(
        name="get_shop_listings",
        method="GET",
        path="/application/shops/{shop_id}/listings",
        request_model=GetShopListingsRequest,
        handler=get_shop_listings,
        description="Get all active listings from a specific shop.",
    ),
    OperationDescriptor(
        name="search_shops",
        method="GET",
        path="/application/shops",
        request_model=SearchShopsRequest,
        handler=search_shops,
        description="Search for Etsy shops by shop name.",
    ),
    OperationDescriptor(
        name="get_shop_sections",
        method="GET",
        path="/application/shops/{shop_id}/sections",
        request_model=GetShopSectionsRequest,
        handler=get_shop_sections,
        description="Get all sections/categories for a specific shop.",
    ),
    OperationDescriptor(
        name="find_shops",
        method="GET",
        path="/application/shops",
        request_model=FindShopsRequest,
        handler=find_shops,
        description="Find shops by location or other criteria.",
    ),
    OperationDescriptor(
        name="create_shop_section",
        method="POST",
        path="/application/shops/{shop_id}/sections",
        request_model=CreateShopSectionRequest,
        handler=create_shop_section,
        requires_auth=True,
        description="Create a new shop section/category. Requires OAuth access token.",
    ),
    OperationDescriptor(
        name="update_shop_section",
        method="PUT",
        path="/application/shops/{shop_id}/sections/{shop_section_id}",
        request_model=UpdateShopSectionRequest,
        handler=update_shop_section,
        requires_auth=True,
        description="Update a shop section. Requires OAuth access token.",
    ),
    OperationDescriptor(
        name="delete_shop_section",
        method="DELETE",
        path="/application/shops/{shop_id}/sections/{shop_section_id}",
        request_model=DeleteShopSectionRequest,
        handler=delete_shop_section,
        requires_auth=True,
        description="Delete a shop section. Requires OAuth access token.",
    ),
    OperationDescriptor(
        name="update_shop",
        method="PUT",
        path="/application/shops/{shop_id}",
        request_model=UpdateShopRequest,
        handler=update_shop,
        requires_auth=True,
        description=(
            "Update shop information (title, announcement, etc.). "
            "Requires OAuth access token."
        ),
    ),
]
