from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from buho_vectors.node import (
    BuhoVectors,
    HttpxRequestExecutor,
    LocalExecutionContext,
    NodeOperationError,
)
from buho_vectors.node.context import HttpCall

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/nodes/buho-vectors", tags=["nodes"])


class ExecuteRequest(BaseModel):
    items: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="Input items; each maps parameter names (account_id, kb_id, query_text, top_k) to values. Missing parameters use their declared defaults.",
    )
    continue_on_fail: bool = Field(
        False,
        description="Report per-item failures as {'error': message} instead of aborting the execution.",
    )


@lru_cache(maxsize=1)
def _get_node() -> BuhoVectors:
    return BuhoVectors()


def get_http_executor() -> HttpCall:
    return HttpxRequestExecutor()


@router.get("", summary="Node description")
async def describe_node() -> Dict[str, Any]:
    description = _get_node().description
    return {**description.to_dict(), "toolSchema": description.tool_schema()}


@router.post(
    "/execute",
    summary="Run a similarity search for each input item",
    response_model=List[List[Dict[str, Any]]],
)
async def execute_node(
    request: ExecuteRequest,
    http_call: HttpCall = Depends(get_http_executor),
) -> List[List[Dict[str, Any]]]:
    node = _get_node()
    ctx = LocalExecutionContext(
        items=request.items,
        http_call=http_call,
        tolerate_failures=request.continue_on_fail,
        description=node.description,
    )
    try:
        outputs = await node.execute(ctx)
    except NodeOperationError as exc:
        raise HTTPException(
            status_code=500, detail=f"Node '{exc.node.name}' failed: {exc}"
        ) from exc

    return [[record.to_dict() for record in output] for output in outputs]
