"""Hosted checkout sessions."""

from __future__ import annotations

from typing import Any, Dict

from payloops.async_client import AsyncLoopClient
from payloops.client import LoopClient


class CheckoutResource:
    def __init__(self, client: LoopClient):
        self._client = client

    def create_session(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """POST /v1/checkout/sessions — returns a session with the URL to redirect the customer to."""
        return self._client.post("/v1/checkout/sessions", params)

    def get_session(self, session_id: str) -> Dict[str, Any]:
        """GET /v1/checkout/sessions/{id}"""
        return self._client.get(f"/v1/checkout/sessions/{session_id}")


class AsyncCheckoutResource:
    def __init__(self, client: AsyncLoopClient):
        self._client = client

    async def create_session(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """POST /v1/checkout/sessions — returns a session with the URL to redirect the customer to."""
        return await self._client.post("/v1/checkout/sessions", params)

    async def get_session(self, session_id: str) -> Dict[str, Any]:
        """GET /v1/checkout/sessions/{id}"""
        return await self._client.get(f"/v1/checkout/sessions/{session_id}")
