from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import ValidationError

if TYPE_CHECKING:
    from .context import NodeInfo


def normalize_error(value: object) -> BaseException:
    """Return ``value`` as an exception, wrapping non-exception failure values."""
    if isinstance(value, BaseException):
        return value
    return RuntimeError(str(value))


def error_message(error: object) -> str:
    """Message of a failure, falling back to the exception type when it has none."""
    error = normalize_error(error)
    if isinstance(error, ValidationError) and error.errors():
        first = error.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        return f"{field}: {first['msg']}" if field else first["msg"]
    return str(error) or type(error).__name__


class NodeOperationError(Exception):
    """A failure that aborted a node execution, attributed to the node that raised it."""

    def __init__(self, node: "NodeInfo", error: object):
        self.node = node
        self.cause = normalize_error(error)
        self.message = error_message(self.cause)
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"NodeOperationError(node={self.node.name!r}, message={self.message!r})"
