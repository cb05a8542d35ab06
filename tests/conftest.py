from __future__ import annotations

from typing import Any, Dict

import pytest

from helpers import API_KEY, BASE_URL, WEBHOOK_SECRET
from payloops import LoopConfig


@pytest.fixture
def config() -> LoopConfig:
    return LoopConfig(api_key=API_KEY, base_url=BASE_URL)


@pytest.fixture
def webhook_secret() -> str:
    return WEBHOOK_SECRET


@pytest.fixture
def event_body() -> Dict[str, Any]:
    return {
        "id": "evt_123",
        "eventType": "order.completed",
        "orderId": "ord_123",
        "amount": 1000,
        "currency": "USD",
        "status": "captured",
        "createdAt": "2026-10-18T12:00:00.000Z",
        "payload": {"test": True},
    }
