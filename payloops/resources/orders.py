"""Orders API."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from payloops.async_client import AsyncLoopClient
from payloops.client import LoopClient


class OrdersResource:
    """Create payment orders, pay them and refund them.

    Params are dicts in the API's camelCase shape, e.g.
    ``{"amount": 1000, "currency": "USD", "externalId": "cart-42"}``.
    """

    def __init__(self, client: LoopClient):
        self._client = client

    def create(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """POST /v1/orders — create a new payment order."""
        return self._client.post("/v1/orders", params)

    def get(self, order_id: str) -> Dict[str, Any]:
        """GET /v1/orders/{id} — fetch an order."""
        return self._client.get(f"/v1/orders/{order_id}")

    def pay(self, order_id: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """POST /v1/orders/{id}/pay — process payment for an order."""
        return self._client.post(f"/v1/orders/{order_id}/pay", params)

    def get_transactions(self, order_id: str) -> List[Dict[str, Any]]:
        """GET /v1/orders/{id}/transactions — list an order's transactions."""
        return self._client.get(f"/v1/orders/{order_id}/transactions")

    def refund(self, order_id: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """POST /v1/orders/{id}/refund — refund all or part of an order."""
        return self._client.post(f"/v1/orders/{order_id}/refund", params)

    def get_refunds(self, order_id: str) -> List[Dict[str, Any]]:
        """GET /v1/orders/{id}/refunds — list an order's refunds."""
        return self._client.get(f"/v1/orders/{order_id}/refunds")


class AsyncOrdersResource:
    """Async variant of :class:`OrdersResource`."""

    def __init__(self, client: AsyncLoopClient):
        self._client = client

    async def create(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """POST /v1/orders — create a new payment order."""
        return await self._client.post("/v1/orders", params)

    async def get(self, order_id: str) -> Dict[str, Any]:
        """GET /v1/orders/{id} — fetch an order."""
        return await self._client.get(f"/v1/orders/{order_id}")

    async def pay(self, order_id: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """POST /v1/orders/{id}/pay — process payment for an order."""
        return await self._client.post(f"/v1/orders/{order_id}/pay", params)

    async def get_transactions(self, order_id: str) -> List[Dict[str, Any]]:
        """GET /v1/orders/{id}/transactions — list an order's transactions."""
        return await self._client.get(f"/v1/orders/{order_id}/transactions")

    async def refund(self, order_id: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """POST /v1/orders/{id}/refund — refund all or part of an order."""
        return await self._client.post(f"/v1/orders/{order_id}/refund", params)

    async def get_refunds(self, order_id: str) -> List[Dict[str, Any]]:
        """GET /v1/orders/{id}/refunds — list an order's refunds."""
        return await self._client.get(f"/v1/orders/{order_id}/refunds")
