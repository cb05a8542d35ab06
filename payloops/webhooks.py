"""Webhook signature verification.

PayLoops signs each delivery with HMAC-SHA256 over ``"<t>.<body>"`` and sends
the result in a header of the form ``t=<epoch_ms>,v1=<hex digest>``. A bare
``v1=<hex digest>`` header (signed over the body alone) is also accepted.

Typical receiver::

    from payloops import webhooks

    event = webhooks.verify(
        payload=request.body,
        signature=request.headers["X-Loop-Signature"],
        secret=WEBHOOK_SECRET,
    )

These are plain functions; there is nothing to instantiate.
"""

from __future__ import annotations

import hashlib
import hmac
import json
import logging
import time
from typing import Optional, Tuple, Union

from payloops.exceptions import WebhookVerificationError
from payloops.models import WebhookEvent

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 300  # seconds

Payload = Union[str, bytes, bytearray]

__all__ = [
    "DEFAULT_TOLERANCE",
    "compute_signature",
    "construct_event",
    "generate_signature_header",
    "verify",
]


def _now_ms() -> int:
    return int(time.time() * 1000)


def _payload_text(payload: Payload) -> str:
    if isinstance(payload, str):
        return payload
    try:
        return bytes(payload).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise WebhookVerificationError.invalid_payload("body is not valid UTF-8") from exc


def _parse_header(header: str) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(timestamp, digest)`` from a signature header.

    Either value is ``None`` (or empty) when the header does not carry it.
    """
    timestamp: Optional[str] = None
    digest: Optional[str] = None
    for part in header.split(","):
        key, _, value = part.strip().partition("=")
        if key == "t":
            timestamp = value
        elif key == "v1":
            digest = value

    if not digest and header.startswith("v1="):
        digest = header[3:]
    return timestamp, digest


def _signed_content(payload: str, timestamp: Optional[str]) -> str:
    return f"{timestamp}.{payload}" if timestamp else payload


def _parse_event(payload: str) -> WebhookEvent:
    try:
        data = json.loads(payload)
    except ValueError as exc:
        raise WebhookVerificationError.invalid_payload(str(exc)) from exc
    if not isinstance(data, dict):
        raise WebhookVerificationError.invalid_payload("expected a JSON object")
    return WebhookEvent.model_validate(data)


def compute_signature(
    payload: Payload,
    secret: str,
    timestamp: Optional[Union[int, str]] = None,
) -> str:
    """Hex HMAC-SHA256 of *payload*, prefixed with ``"<timestamp>."`` when given."""
    ts = str(timestamp) if timestamp is not None else None
    content = _signed_content(_payload_text(payload), ts)
    return hmac.new(secret.encode("utf-8"), content.encode("utf-8"), hashlib.sha256).hexdigest()


def generate_signature_header(
    payload: Payload,
    secret: str,
    timestamp: Optional[int] = None,
) -> str:
    """Build a ``t=...,v1=...`` header the way the PayLoops backend does.

    Useful for testing a receiver locally. *timestamp* is epoch
    milliseconds and defaults to now.
    """
    ts = _now_ms() if timestamp is None else timestamp
    return f"t={ts},v1={compute_signature(payload, secret, ts)}"


def verify(
    payload: Payload,
    signature: str,
    secret: str,
    tolerance: float = DEFAULT_TOLERANCE,
    *,
    now_ms: Optional[int] = None,
) -> WebhookEvent:
    """Authenticate a webhook delivery and return its event.

    Parameters
    ----------
    payload:
        The raw request body, exactly as received.
    signature:
        The signature header value.
    secret:
        The merchant's webhook secret.
    tolerance:
        Maximum distance in seconds between the signed timestamp and now,
        in either direction.
    now_ms:
        Current time in epoch milliseconds; defaults to the wall clock.

    Raises
    ------
    WebhookVerificationError
        With reason ``INVALID_FORMAT`` when no ``v1`` digest (or an unparseable
        timestamp) is present, ``EXPIRED`` when the timestamp is outside the
        tolerance window, ``INVALID_SIGNATURE`` when the digest does not match,
        and ``INVALID_PAYLOAD`` when the body is not UTF-8 JSON holding an object.
    """
    body = _payload_text(payload)
    timestamp, received = _parse_header(signature)

    if not received:
        logger.debug("Rejecting webhook: no v1 digest in signature header")
        raise WebhookVerificationError.invalid_format()

    if timestamp:
        if not (timestamp.isascii() and timestamp.isdigit()):
            logger.debug("Rejecting webhook: unparseable timestamp %r", timestamp)
            raise WebhookVerificationError.invalid_format()

        timestamp_ms = int(timestamp)
        now = _now_ms() if now_ms is None else now_ms
        if abs(now - timestamp_ms) > tolerance * 1000:
            logger.debug("Rejecting webhook: timestamp %s outside %ss window", timestamp, tolerance)
            raise WebhookVerificationError.expired()

    expected = hmac.new(
        secret.encode("utf-8"),
        _signed_content(body, timestamp).encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()

    # compare_digest returns False for unequal lengths instead of raising.
    if not hmac.compare_digest(received.encode("utf-8"), expected.encode("utf-8")):
        logger.debug("Rejecting webhook: signature mismatch")
        raise WebhookVerificationError.invalid_signature()

    return _parse_event(body)


def construct_event(payload: Payload) -> WebhookEvent:
    """Parse a webhook body WITHOUT checking its signature.

    Anyone can post a body to your endpoint, so never base trust decisions
    (fulfilment, refunds, account changes) on an event obtained this way.
    Use :func:`verify` for that.
    """
    return _parse_event(_payload_text(payload))
