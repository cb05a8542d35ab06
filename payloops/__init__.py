"""PayLoops SDK — Python client for the PayLoops payments API."""

from payloops import webhooks
from payloops._base import SDK_VERSION
from payloops.async_client import AsyncLoopClient
from payloops.client import LoopClient
from payloops.config import LoopConfig
from payloops.exceptions import (
    ErrorKind,
    LoopError,
    WebhookFailure,
    WebhookVerificationError,
)
from payloops.loop import AsyncLoop, Loop
from payloops.models import WebhookEvent

__all__ = [
    "AsyncLoop",
    "AsyncLoopClient",
    "ErrorKind",
    "Loop",
    "LoopClient",
    "LoopConfig",
    "LoopError",
    "WebhookEvent",
    "WebhookFailure",
    "WebhookVerificationError",
    "webhooks",
]

__version__ = SDK_VERSION
