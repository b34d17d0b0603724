from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from buho_vectors.config import get_settings

from .schemas import HttpRequestOptions

logger = logging.getLogger(__name__)


class HttpxRequestExecutor:
    """HTTP capability backed by httpx.

    Any transport error, non-2xx status or undecodable JSON body propagates to
    the caller. No retries.
    """

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        *,
        timeout: Optional[float] = None,
    ) -> None:
        self._client = client
        self._owns_client = False
        self.timeout = timeout if timeout is not None else get_settings().http_timeout

    async def __aenter__(self) -> "HttpxRequestExecutor":
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))
            self._owns_client = True
        return self

    async def __aexit__(self, *exc_info) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
            self._owns_client = False

    async def __call__(self, options: HttpRequestOptions) -> Any:
        if self._client is not None:
            return await self._send(self._client, options)
        async with httpx.AsyncClient(timeout=httpx.Timeout(self.timeout)) as client:
            return await self._send(client, options)

    async def _send(self, client: httpx.AsyncClient, options: HttpRequestOptions) -> Any:
        headers: Dict[str, str] = dict(options.headers)
        kwargs: Dict[str, Any] = {}
        if options.json:
            headers.setdefault("Accept", "application/json")
            if options.body is not None:
                kwargs["json"] = options.body
        elif options.body is not None:
            kwargs["data"] = options.body

        logger.debug("%s %s", options.method, options.url)
        r = await client.request(options.method, options.url, headers=headers, **kwargs)
        r.raise_for_status()
        if options.json:
            return r.json()
        return r.text
