"""Synchronous transport client (uses httpx)."""

from __future__ import annotations

from typing import Any, Optional

import httpx

from payloops._base import _build_request_kwargs, _handle_response, _transport_error
from payloops.config import LoopConfig


class LoopClient:
    """Issues one authenticated request per call and classifies the outcome.

    Usage::

        with LoopClient(LoopConfig(api_key="sk_test_...")) as client:
            order = client.get("/v1/orders/ord_123")

    Every failure is raised as :class:`~payloops.exceptions.LoopError`.
    There are no retries.

    ``timeout_ms`` is applied by httpx to each phase of the call (connect,
    write, read, pool) separately, so a call that trickles in slowly can
    take longer than ``timeout_ms`` in total. Use
    :class:`~payloops.async_client.AsyncLoopClient` when a hard overall
    deadline is needed.
    """

    def __init__(
        self,
        config: LoopConfig,
        *,
        http_client: Optional[httpx.Client] = None,
    ):
        self.config = config
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=httpx.Timeout(config.timeout_seconds))

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> "LoopClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def request(self, method: str, path: str, body: Any = None) -> Any:
        kwargs = _build_request_kwargs(self.config, method, path, body)
        try:
            resp = self._client.request(**kwargs)
        except httpx.RequestError as exc:
            raise _transport_error(exc) from exc
        return _handle_response(resp)

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, body: Any = None) -> Any:
        return self.request("POST", path, body)

    def put(self, path: str, body: Any = None) -> Any:
        return self.request("PUT", path, body)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)
