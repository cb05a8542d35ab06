"""Test helpers: a recording mock transport and canned responses."""

from __future__ import annotations

import json
from typing import Any, Callable, List, Optional

import httpx

API_KEY = "sk_test_123456789"
BASE_URL = "https://api.test.loop.dev"
WEBHOOK_SECRET = "whsec_test_secret_123"


class RecordingTransport:
    """Collects requests and answers them with a canned response.

    ``handler`` receives the request and returns an ``httpx.Response``;
    by default every request gets ``200 {"ok": true}``.
    """

    def __init__(self, handler: Optional[Callable[[httpx.Request], httpx.Response]] = None):
        self.requests: List[httpx.Request] = []
        self._handler = handler or (lambda request: httpx.Response(200, json={"ok": True}))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


def respond(status: int, body: Any = None) -> Callable[[httpx.Request], httpx.Response]:
    if body is None:
        return lambda request: httpx.Response(status)
    return lambda request: httpx.Response(status, json=body)
