from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, List, Mapping, Protocol, Sequence

from .description import NodeDescription
from .schemas import HttpRequestOptions

HttpCall = Callable[[HttpRequestOptions], Awaitable[Any]]


@dataclass(frozen=True)
class NodeInfo:
    name: str
    type: str = "buhoVectors"
    type_version: int = 1


class ExecuteFunctions(Protocol):
    """Capabilities the workflow host hands to a node while it executes."""

    def get_input_data(self) -> Sequence[Mapping[str, Any]]: ...

    def get_node_parameter(self, name: str, item_index: int) -> Any: ...

    def continue_on_fail(self) -> bool: ...

    def get_node(self) -> NodeInfo: ...

    async def http_request(self, options: HttpRequestOptions) -> Any: ...


@dataclass
class LocalExecutionContext:
    """In-process host: each input item is a dict of raw parameter values.

    Parameters missing from an item, or set to None, resolve to the default
    declared in the node description.
    """

    items: Sequence[Mapping[str, Any]]
    http_call: HttpCall
    tolerate_failures: bool = False
    description: NodeDescription = field(default_factory=NodeDescription)
    node: NodeInfo | None = None

    def get_input_data(self) -> List[Mapping[str, Any]]:
        return list(self.items)

    def get_node_parameter(self, name: str, item_index: int) -> Any:
        prop = self.description.property(name)
        item = self.items[item_index]
        value = item.get(name)
        return prop.default if value is None else value

    def continue_on_fail(self) -> bool:
        return self.tolerate_failures

    def get_node(self) -> NodeInfo:
        if self.node is None:
            self.node = NodeInfo(
                name=self.description.defaults.get("name", self.description.name),
                type_version=self.description.version,
            )
        return self.node

    async def http_request(self, options: HttpRequestOptions) -> Any:
        return await self.http_call(options)
