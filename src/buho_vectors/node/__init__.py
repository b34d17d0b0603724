"""Buho Suite Vectors node: description, per-item dispatch and host capabilities."""

from .context import ExecuteFunctions, LocalExecutionContext, NodeInfo
from .description import NodeDescription, NodeProperty
from .dispatcher import BuhoVectors, dispatch_item, read_parameters
from .errors import NodeOperationError, error_message, normalize_error
from .http import HttpxRequestExecutor
from .schemas import (
    SEARCH_URL,
    HttpRequestOptions,
    ItemFailure,
    ItemResult,
    ItemSuccess,
    NodeExecutionData,
    SearchParameters,
    build_search_request,
)

__all__ = [
    "BuhoVectors",
    "ExecuteFunctions",
    "HttpRequestOptions",
    "HttpxRequestExecutor",
    "ItemFailure",
    "ItemResult",
    "ItemSuccess",
    "LocalExecutionContext",
    "NodeDescription",
    "NodeExecutionData",
    "NodeInfo",
    "NodeOperationError",
    "NodeProperty",
    "SEARCH_URL",
    "SearchParameters",
    "build_search_request",
    "dispatch_item",
    "error_message",
    "normalize_error",
    "read_parameters",
]
