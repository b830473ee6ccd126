"""Tests for the Etsy HTTP client."""

import httpx
import pytest

from etsy_mcp.config.etsy import EtsyConfig
from etsy_mcp.utils.etsy import USER_AGENT, EtsyClient


class TestHeaders:
    """Headers are derived from the credentials."""

    def test_api_key_only(self, read_only_config):
        client = EtsyClient(read_only_config)

        assert client.headers["x-api-key"] == "test-key"
        assert client.headers["User-Agent"] == USER_AGENT
        assert "Authorization" not in client.headers

    def test_bearer_token_when_access_token_is_set(self, authorized_config):
        client = EtsyClient(authorized_config)

        assert client.headers["Authorization"] == "Bearer test-token"

    def test_headers_property_returns_a_copy(self, read_only_config):
        client = EtsyClient(read_only_config)

        client.headers["x-api-key"] = "changed"

        assert client.headers["x-api-key"] == "test-key"


class TestRequest:
    """Tests for EtsyClient.request."""

    @pytest.mark.asyncio
    async def test_sends_credentials_and_joins_base_url(
        self, authorized_config, transport
    ):
        async with EtsyClient(authorized_config, transport=transport) as client:
            await client.get("/application/shops/1", params={"limit": 5})

        request = transport.last
        assert request.method == "GET"
        assert str(request.url) == "https://openapi.etsy.com/v3/application/shops/1?limit=5"
        assert request.headers["x-api-key"] == "test-key"
        assert request.headers["authorization"] == "Bearer test-token"

    @pytest.mark.asyncio
    async def test_custom_base_url(self, transport):
        config = EtsyConfig(api_key="k", base_url="http://localhost:8080/v3/")

        async with EtsyClient(config, transport=transport) as client:
            await client.get("/application/listings/1")

        assert str(transport.last.url) == "http://localhost:8080/v3/application/listings/1"

    @pytest.mark.asyncio
    async def test_returns_decoded_json(self, read_only_config, transport):
        transport.body = {"listing_id": 1, "title": "Mug"}

        async with EtsyClient(read_only_config, transport=transport) as client:
            body = await client.get("/application/listings/1")

        assert body == {"listing_id": 1, "title": "Mug"}

    @pytest.mark.asyncio
    async def test_no_content_returns_none(self, read_only_config, transport):
        transport.status_code = 204

        async with EtsyClient(read_only_config, transport=transport) as client:
            body = await client.delete("/application/listings/1")

        assert body is None

    @pytest.mark.asyncio
    async def test_non_json_body_returns_text(self, read_only_config, transport):
        transport.body = "plain text"

        async with EtsyClient(read_only_config, transport=transport) as client:
            body = await client.get("/application/listings/1")

        assert body == "plain text"

    @pytest.mark.asyncio
    async def test_error_status_raises(self, read_only_config, transport):
        transport.status_code = 404
        transport.body = {"error": "Listing not found"}

        async with EtsyClient(read_only_config, transport=transport) as client:
            with pytest.raises(httpx.HTTPStatusError) as exc_info:
                await client.get("/application/listings/999")

        assert exc_info.value.response.status_code == 404

    @pytest.mark.asyncio
    async def test_json_body_on_write(self, authorized_config, transport):
        async with EtsyClient(authorized_config, transport=transport) as client:
            await client.patch("/application/shops/1/listings/2", json={"price": 9.5})

        assert transport.last.method == "PATCH"
        assert transport.last_json() == {"price": 9.5}

    @pytest.mark.asyncio
    async def test_close_resets_client(self, read_only_config, transport):
        client = EtsyClient(read_only_config, transport=transport)
        first = client.client

        await client.close()

        assert client.client is not first
        await client.close()
