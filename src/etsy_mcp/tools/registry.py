"""Operation registry.

Static catalog of the Etsy operations the dispatcher accepts. Each descriptor
carries its HTTP method and path, whether it needs an OAuth token, the request
model describing its input shape, and the handler performing the call.
"""

from collections.abc import Awaitable, Callable, Iterable, Iterator
from dataclasses import dataclass
import logging
import types
from typing import Any, Literal, Union, get_args, get_origin

from pydantic import BaseModel

from etsy_mcp.utils.etsy import EtsyClient, EtsyMCPError

logger = logging.getLogger(__name__)

Handler = Callable[[Any, EtsyClient], Awaitable[Any]]


class UnknownOperationError(EtsyMCPError):
    """Operation name is not in the registry."""

    pass


@dataclass(frozen=True)
class InputField:
    """One accepted input field of an operation."""

    name: str
    type: str
    required: bool
    allowed_values: tuple[Any, ...] | None = None
    description: str | None = None


def _allowed_values(annotation: Any) -> tuple[Any, ...] | None:
    """Literal values of an annotation, looking through Optional and list."""
    if get_origin(annotation) is Literal:
        return get_args(annotation)
    for arg in get_args(annotation):
        values = _allowed_values(arg)
        if values:
            return values
    return None


def _type_name(annotation: Any) -> str:
    origin = get_origin(annotation)
    if origin is Literal:
        return type(get_args(annotation)[0]).__name__
    if origin in (Union, types.UnionType):
        args = [a for a in get_args(annotation) if a is not type(None)]
        return _type_name(args[0]) if len(args) == 1 else " | ".join(
            _type_name(a) for a in args
        )
    if origin is list:
        (item,) = get_args(annotation)
        return f"list[{_type_name(item)}]"
    if isinstance(annotation, type):
        return annotation.__name__
    return str(annotation)


@dataclass(frozen=True)
class OperationDescriptor:
    """A named operation mapping to exactly one HTTP call."""

    name: str
    method: str
    path: str
    request_model: type[BaseModel]
    handler: Handler
    requires_auth: bool = False
    description: str = ""

    @property
    def input_fields(self) -> tuple[InputField, ...]:
        """Accepted fields in declaration order."""
        return tuple(
            InputField(
                name=name,
                type=_type_name(field.annotation),
                required=field.is_required(),
                allowed_values=_allowed_values(field.annotation),
                description=field.description,
            )
            for name, field in self.request_model.model_fields.items()
        )

    @property
    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the request model."""
        return self.request_model.model_json_schema()


class OperationRegistry:
    """Lookup table from operation name to descriptor.

    Filled once at startup; the single source of truth for what the
    dispatcher accepts.
    """

    def __init__(self, operations: Iterable[OperationDescriptor] = ()) -> None:
        self._operations: dict[str, OperationDescriptor] = {}
        for operation in operations:
            self.register(operation)

    def register(self, operation: OperationDescriptor) -> None:
        """Register an operation.

        Raises:
            ValueError: If the name is already registered
        """
        if operation.name in self._operations:
            raise ValueError(f"Operation '{operation.name}' is already registered")
        self._operations[operation.name] = operation
        logger.debug(
            "Operation registered: %s %s %s",
            operation.name,
            operation.method,
            operation.path,
        )

    def get(self, name: str) -> OperationDescriptor:
        """Look up an operation by name.

        Raises:
            UnknownOperationError: If no operation has this name
        """
        try:
            return self._operations[name]
        except KeyError:
            raise UnknownOperationError(f"Unknown tool: {name}") from None

    def names(self) -> list[str]:
        """Operation names in registration order."""
        return list(self._operations)

    def list_operations(
        self, requires_auth: bool | None = None
    ) -> list[OperationDescriptor]:
        """List operations, optionally only read (False) or write (True) ones."""
        operations = list(self._operations.values())
        if requires_auth is not None:
            operations = [o for o in operations if o.requires_auth == requires_auth]
        return operations

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    def __iter__(self) -> Iterator[OperationDescriptor]:
        return iter(self._operations.values())

    def __len__(self) -> int:
        return len(self._operations)
