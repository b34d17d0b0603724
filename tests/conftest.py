from __future__ import annotations

from typing import Any, List, Sequence

import pytest

from buho_vectors.node import HttpRequestOptions


class RecordingHttpCall:
    """Fake HTTP capability: replays scripted outcomes and records each request."""

    def __init__(self, outcomes: Sequence[Any]):
        self.outcomes = list(outcomes)
        self.calls: List[HttpRequestOptions] = []

    async def __call__(self, options: HttpRequestOptions) -> Any:
        self.calls.append(options)
        outcome = self.outcomes[len(self.calls) - 1]
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def make_http_call():
    return RecordingHttpCall


@pytest.fixture
def item():
    return {"account_id": "A1", "kb_id": "K1", "query_text": "hello", "top_k": 3}
