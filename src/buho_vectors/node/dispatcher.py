from __future__ import annotations

import logging
from typing import List

from .context import ExecuteFunctions
from .description import NodeDescription
from .errors import NodeOperationError
from .schemas import (
    ItemFailure,
    ItemResult,
    ItemSuccess,
    NodeExecutionData,
    SearchParameters,
    build_search_request,
)

logger = logging.getLogger(__name__)


def read_parameters(ctx: ExecuteFunctions, index: int) -> SearchParameters:
    return SearchParameters(
        account_id=ctx.get_node_parameter("account_id", index),
        kb_id=ctx.get_node_parameter("kb_id", index),
        query_text=ctx.get_node_parameter("query_text", index),
        top_k=ctx.get_node_parameter("top_k", index),
    )


async def dispatch_item(ctx: ExecuteFunctions, index: int) -> ItemResult:
    """Run the search for one item and capture its outcome.

    Parameter coercion errors count as item failures, like transport errors.
    """
    try:
        params = read_parameters(ctx, index)
        logger.debug(
            "Dispatching item %d: account_id=%s kb_id=%s top_k=%s",
            index,
            params.account_id,
            params.kb_id,
            params.top_k,
        )
        response = await ctx.http_request(build_search_request(params))
    except Exception as exc:
        return ItemFailure(index=index, error=exc)
    return ItemSuccess(index=index, response=response)


class BuhoVectors:
    """Similarity search over a Buho Suite knowledge base.

    Items are processed one at a time, in input order; the next request is
    only sent once the previous one has resolved. With failure tolerance
    enabled a failed item yields ``{"error": message}`` in its slot, otherwise
    the first failure aborts the whole execution with NodeOperationError.
    """

    description = NodeDescription()

    async def execute(self, ctx: ExecuteFunctions) -> List[List[NodeExecutionData]]:
        items = ctx.get_input_data()
        tolerant = ctx.continue_on_fail()
        return_data: List[NodeExecutionData] = []

        for i in range(len(items)):
            result = await dispatch_item(ctx, i)
            if isinstance(result, ItemSuccess):
                return_data.append(NodeExecutionData(json=result.response))
                continue

            if tolerant:
                logger.warning("Item %d failed, continuing: %s", i, result.message)
                return_data.append(NodeExecutionData(json={"error": result.message}))
                continue

            node = ctx.get_node()
            logger.error("Item %d failed, aborting %r: %s", i, node.name, result.message)
            raise NodeOperationError(node, result.error) from result.error

        return [return_data]
