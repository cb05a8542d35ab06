"""Asynchronous transport client (uses httpx.AsyncClient)."""

from __future__ import annotations

import asyncio
from typing import Any, Optional

import httpx

from payloops._base import (
    _build_request_kwargs,
    _handle_response,
    _transport_error,
    logger,
)
from payloops.config import LoopConfig
from payloops.exceptions import LoopError


class AsyncLoopClient:
    """Async counterpart of :class:`~payloops.client.LoopClient`.

    Usage::

        async with AsyncLoopClient(LoopConfig(api_key="sk_test_...")) as client:
            order = await client.get("/v1/orders/ord_123")

    Besides the httpx per-phase timeouts, each call runs under an overall
    deadline of ``timeout_ms``. When it elapses the in-flight request is
    cancelled and a timeout error is raised.
    """

    def __init__(
        self,
        config: LoopConfig,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=httpx.Timeout(config.timeout_seconds))

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    async def __aenter__(self) -> "AsyncLoopClient":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    async def request(self, method: str, path: str, body: Any = None) -> Any:
        kwargs = _build_request_kwargs(self.config, method, path, body)
        try:
            resp = await asyncio.wait_for(
                self._client.request(**kwargs),
                timeout=self.config.timeout_seconds,
            )
        except asyncio.TimeoutError as exc:
            logger.warning(
                "Request %s %s exceeded %sms", kwargs["method"], kwargs["url"], self.config.timeout_ms
            )
            raise LoopError.timeout() from exc
        except httpx.RequestError as exc:
            raise _transport_error(exc) from exc
        return _handle_response(resp)

    async def get(self, path: str) -> Any:
        return await self.request("GET", path)

    async def post(self, path: str, body: Any = None) -> Any:
        return await self.request("POST", path, body)

    async def put(self, path: str, body: Any = None) -> Any:
        return await self.request("PUT", path, body)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)
