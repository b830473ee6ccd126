"""Base request schemas shared by all Etsy operations."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_LIMIT = 25
MAX_LIMIT = 100


class EtsyRequest(BaseModel):
    """Arguments of one operation.

    Unknown keys are ignored, so callers sending extra arguments get the
    same request as before.
    """

    model_config = ConfigDict(extra="ignore")


class PaginatedRequest(EtsyRequest):
    """Request with limit/offset pagination."""

    limit: int = Field(
        default=DEFAULT_LIMIT,
        ge=1,
        le=MAX_LIMIT,
        description="Maximum number of results (default: 25, max: 100)",
    )
    offset: int = Field(
        default=0,
        ge=0,
        description="Number of results to skip (for pagination)",
    )
