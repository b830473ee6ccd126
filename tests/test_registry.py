"""Tests for the operation registry."""

import pytest

from etsy_mcp.schemas.etsy.listings import GetListingRequest
from etsy_mcp.servers.etsy.server import build_registry
from etsy_mcp.tools.registry import (
    OperationDescriptor,
    OperationRegistry,
    UnknownOperationError,
)

READ_OPERATIONS = {
    "search_listings",
    "get_listing",
    "get_listing_inventory",
    "get_listing_images",
    "get_trending_listings",
    "get_shop",
    "get_shop_listings",
    "search_shops",
    "get_shop_sections",
    "find_shops",
}

WRITE_OPERATIONS = {
    "create_listing",
    "update_listing",
    "delete_listing",
    "update_listing_inventory",
    "upload_listing_image",
    "create_shop_section",
    "update_shop_section",
    "delete_shop_section",
    "update_shop",
}


async def _noop(request, client):
    return None


class TestOperationRegistry:
    """Tests for the OperationRegistry."""

    def test_contains_all_operations(self):
        registry = build_registry()

        assert set(registry.names()) == READ_OPERATIONS | WRITE_OPERATIONS
        assert len(registry) == 19

    def test_write_operations_require_auth(self):
        registry = build_registry()

        writes = {o.name for o in registry.list_operations(requires_auth=True)}
        reads = {o.name for o in registry.list_operations(requires_auth=False)}

        assert writes == WRITE_OPERATIONS
        assert reads == READ_OPERATIONS

    def test_every_operation_has_method_and_path(self):
        for operation in build_registry():
            assert operation.method in {"GET", "POST", "PATCH", "PUT", "DELETE"}
            assert operation.path.startswith("/application/")
            assert operation.description

    def test_get_unknown_operation_raises(self):
        registry = build_registry()

        with pytest.raises(UnknownOperationError, match="Unknown tool: nope"):
            registry.get("nope")

        assert "nope" not in registry

    def test_register_duplicate_raises(self):
        operation = OperationDescriptor(
            name="get_listing",
            method="GET",
            path="/application/listings/{listing_id}",
            request_model=GetListingRequest,
            handler=_noop,
        )
        registry = OperationRegistry([operation])

        with pytest.raises(ValueError, match="already registered"):
            registry.register(operation)


class TestInputFields:
    """Input shapes are derived from the request models."""

    @staticmethod
    def _fields(name):
        return {f.name: f for f in build_registry().get(name).input_fields}

    def test_required_and_optional_fields(self):
        fields = self._fields("search_listings")

        assert fields["keywords"].required
        assert fields["keywords"].type == "str"
        assert not fields["limit"].required
        assert fields["min_price"].type == "int | float"

    def test_sort_order_allowed_values(self):
        fields = self._fields("search_listings")

        assert fields["sort_order"].allowed_values == (
            "asc",
            "desc",
            "ascending",
            "descending",
        )
        assert fields["sort_on"].allowed_values == ("created", "price", "updated", "score")

    def test_listing_state_allowed_values(self):
        fields = self._fields("get_shop_listings")

        assert fields["state"].allowed_values == (
            "active",
            "inactive",
            "sold_out",
            "draft",
            "expired",
        )

    def test_includes_is_a_list_of_literals(self):
        fields = self._fields("get_listing")

        assert fields["includes"].type == "list[str]"
        assert "Images" in fields["includes"].allowed_values

    def test_input_schema_is_json_schema(self):
        schema = build_registry().get("create_listing").input_schema

        assert set(schema["required"]) >= {"shop_id", "title", "price", "who_made"}
        assert schema["properties"]["who_made"]["enum"] == [
            "i_did",
            "someone_else",
            "collective",
        ]
