"""Uniform result envelope returned by every dispatched operation."""

import json
from typing import Any, Literal

from pydantic import BaseModel, Field

JSON_INDENT = 2


class TextContent(BaseModel):
    """A single text content block."""

    type: Literal["text"] = "text"
    text: str = Field(description="Pretty-printed JSON (success body or error)")


class ResultEnvelope(BaseModel):
    """Exactly one envelope per invocation, never partial."""

    content: list[TextContent] = Field(
        description="Content blocks (always a single text block)"
    )

    @property
    def text(self) -> str:
        """Text of the (single) content block."""
        return self.content[0].text

    def parsed(self) -> Any:
        """The JSON value carried in the text block."""
        return json.loads(self.text)


def _dumps(value: Any) -> str:
    return json.dumps(value, indent=JSON_INDENT, ensure_ascii=False)


def format_success(value: Any) -> ResultEnvelope:
    """Wrap a successful response body."""
    return ResultEnvelope(content=[TextContent(text=_dumps(value))])


def format_failure(error: Any, status: int | None = None) -> ResultEnvelope:
    """Wrap a failure as ``{"error": ..., "status": ...}``.

    ``status`` is omitted when unknown (e.g. network failure, auth precondition).
    """
    payload: dict[str, Any] = {"error": error}
    if status is not None:
        payload["status"] = status
    return ResultEnvelope(content=[TextContent(text=_dumps(payload))])
