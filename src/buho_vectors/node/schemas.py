from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Union

from pydantic import BaseModel, ConfigDict, Field

from .errors import error_message

SEARCH_URL = (
    "https://api.buhosuite.com/api/v2/kbvectors/ep_search_similar_chunks_contents_by_text/"
)


class SearchParameters(BaseModel):
    """Per-item node parameters.

    Only the coercion implied by each field's type is applied. Empty ids are
    forwarded unchanged; the remote service validates them.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    account_id: str = Field("", description="Identificador de la cuenta asociada al RAG")
    kb_id: str = Field("", description="Identificador de la base de conocimiento")
    query_text: str = Field(
        "",
        description="Texto o pregunta que se desea buscar dentro de la base de conocimiento",
    )
    top_k: int = Field(
        5,
        description="Número de chunks o fragmentos más relevantes que se deben recuperar",
    )


@dataclass(frozen=True)
class HttpRequestOptions:
    method: str
    url: str
    body: Dict[str, Any] | None = None
    json: bool = True
    headers: Mapping[str, str] = field(default_factory=dict)


def build_search_request(params: SearchParameters) -> HttpRequestOptions:
    """Build the similarity-search request for one item.

    Pure: the body depends only on ``params`` and always carries exactly the
    four fields, in a fixed order.
    """
    return HttpRequestOptions(
        method="POST",
        url=SEARCH_URL,
        body={
            "account_id": params.account_id,
            "kb_id": params.kb_id,
            "query_text": params.query_text,
            "top_k": params.top_k,
        },
        json=True,
    )


@dataclass
class NodeExecutionData:
    json: Any

    def to_dict(self) -> Dict[str, Any]:
        return {"json": self.json}


@dataclass(frozen=True)
class ItemSuccess:
    index: int
    response: Any


@dataclass(frozen=True)
class ItemFailure:
    index: int
    error: BaseException

    @property
    def message(self) -> str:
        return error_message(self.error)


ItemResult = Union[ItemSuccess, ItemFailure]
