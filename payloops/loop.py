"""Top-level SDK entry points."""

from __future__ import annotations

import dataclasses
from typing import Any, Optional, Union

import httpx

from payloops import webhooks
from payloops.async_client import AsyncLoopClient
from payloops.client import LoopClient
from payloops.config import DEFAULT_BASE_URL, LoopConfig
from payloops.resources import (
    AsyncCheckoutResource,
    AsyncOrdersResource,
    CheckoutResource,
    OrdersResource,
)


def _normalize_config(
    config: Union[str, LoopConfig, None],
    api_key: Optional[str],
    base_url: Optional[str],
    timeout_ms: Optional[int],
) -> LoopConfig:
    if isinstance(config, LoopConfig):
        overrides = {"api_key": api_key, "base_url": base_url, "timeout_ms": timeout_ms}
        overrides = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(config, **overrides) if overrides else config
    return LoopConfig(
        api_key=config or api_key or "",
        base_url=base_url or DEFAULT_BASE_URL,
        timeout_ms=timeout_ms,  # type: ignore[arg-type]
    )


class Loop:
    """Synchronous PayLoops client.

    Usage::

        loop = Loop("sk_test_...")
        order = loop.orders.create({"amount": 1000, "currency": "USD"})
        session = loop.checkout.create_session({...})

        event = Loop.webhooks.verify(payload=body, signature=header, secret=secret)
    """

    #: Webhook helpers, usable without an instance.
    webhooks = webhooks

    def __init__(
        self,
        config: Union[str, LoopConfig, None] = None,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_ms: Optional[int] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        self.config = _normalize_config(config, api_key, base_url, timeout_ms)
        self._client = LoopClient(self.config, http_client=http_client)
        self.orders = OrdersResource(self._client)
        self.checkout = CheckoutResource(self._client)

    def __enter__(self) -> "Loop":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()


class AsyncLoop:
    """Asynchronous PayLoops client.

    Usage::

        async with AsyncLoop("sk_test_...") as loop:
            order = await loop.orders.create({"amount": 1000})
    """

    webhooks = webhooks

    def __init__(
        self,
        config: Union[str, LoopConfig, None] = None,
        *,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_ms: Optional[int] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = _normalize_config(config, api_key, base_url, timeout_ms)
        self._client = AsyncLoopClient(self.config, http_client=http_client)
        self.orders = AsyncOrdersResource(self._client)
        self.checkout = AsyncCheckoutResource(self._client)

    async def __aenter__(self) -> "AsyncLoop":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.close()
