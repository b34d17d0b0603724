"""Buho Suite Vectors workflow node.

Forwards a knowledge-base similarity search to the Buho Suite API, one request
per input item, and returns the JSON responses as the node's output.
"""

from .node import BuhoVectors, NodeOperationError

__all__ = ["BuhoVectors", "NodeOperationError"]

__version__ = "0.1.0"
