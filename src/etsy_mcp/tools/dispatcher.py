"""Request dispatcher.

Routes a named operation plus an argument bag to exactly one Etsy API call and
wraps the outcome in a ResultEnvelope.

Error handling:
- unknown operation name: UnknownOperationError is raised
- argument bag not matching the operation's request model: InvalidArgumentsError
  is raised
- write operation without OAuth token: error envelope, no HTTP call
- HTTP error status or network failure: error envelope ``{error, status?}``
- anything else propagates unchanged
"""

from collections.abc import Mapping
import logging
from typing import Any

from fastmcp.exceptions import ToolError
import httpx
from pydantic import ValidationError

from etsy_mcp.config.etsy import EtsyConfig
from etsy_mcp.schemas.base.envelope import (
    ResultEnvelope,
    format_failure,
    format_success,
)
from etsy_mcp.tools.registry import OperationRegistry
from etsy_mcp.utils.etsy import EtsyClient, EtsyMCPError

logger = logging.getLogger(__name__)

AUTH_REQUIRED_MESSAGE = (
    "OAuth access token required. Set ETSY_ACCESS_TOKEN environment variable."
)


class InvalidArgumentsError(EtsyMCPError):
    """Arguments do not match the operation's input shape."""

    def __init__(self, operation: str, error: ValidationError) -> None:
        self.operation = operation
        self.errors = error.errors(include_url=False)
        super().__init__(f"Invalid arguments for {operation}: {error}")


def _error_detail(error: httpx.HTTPStatusError) -> Any:
    """Response body of a failed request (JSON if possible), else the message."""
    response = error.response
    if response.content:
        try:
            return response.json()
        except ValueError:
            return response.text
    return str(error)


class Dispatcher:
    """Stateless dispatcher bound to one set of credentials and one client."""

    def __init__(
        self,
        config: EtsyConfig,
        client: EtsyClient,
        registry: OperationRegistry,
    ) -> None:
        self.config = config
        self.client = client
        self.registry = registry

    async def dispatch(
        self,
        operation_name: str,
        args: Mapping[str, Any] | None = None,
    ) -> ResultEnvelope:
        """Execute one operation.

        Args:
            operation_name: Name of a registered operation (e.g. "search_listings")
            args: Argument bag for the operation; None values count as absent

        Returns:
            ResultEnvelope with the response body or an error object

        Raises:
            UnknownOperationError: If the operation is not registered
            InvalidArgumentsError: If the arguments fail validation
        """
        operation = self.registry.get(operation_name)

        if operation.requires_auth and not self.config.has_access_token:
            logger.info("%s requires an OAuth access token, skipping", operation.name)
            return format_failure(AUTH_REQUIRED_MESSAGE)

        present = {k: v for k, v in (args or {}).items() if v is not None}
        try:
            request = operation.request_model.model_validate(present)
        except ValidationError as e:
            raise InvalidArgumentsError(operation.name, e) from e

        logger.debug(
            "Dispatching %s (%s %s)", operation.name, operation.method, operation.path
        )

        try:
            body = await operation.handler(request, self.client)
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning("%s failed with HTTP %d", operation.name, status)
            return format_failure(_error_detail(e), status=status)
        except httpx.RequestError as e:
            logger.warning("%s failed: %s", operation.name, e)
            return format_failure(str(e) or type(e).__name__)

        return format_success(body)

    async def run(self, operation_name: str, **arguments: Any) -> str:
        """Dispatch from MCP tool arguments and return the envelope text.

        Raises:
            ToolError: If the arguments fail validation
        """
        try:
            envelope = await self.dispatch(operation_name, arguments)
        except InvalidArgumentsError as e:
            raise ToolError(str(e)) from e
        return envelope.text
