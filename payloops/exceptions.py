"""SDK error types.

Every failure raised by the transport client is a :class:`LoopError`. The
``kind`` attribute says which failure it is, so callers branch on that rather
than on subclasses::

    try:
        loop.orders.get(order_id)
    except LoopError as err:
        if err.kind is ErrorKind.NOT_FOUND:
            ...

Webhook verification failures are reported separately by
:class:`WebhookVerificationError`.
"""

from __future__ import annotations

import enum
from typing import Any, Dict, Optional


class ErrorKind(str, enum.Enum):
    """Discriminant for :class:`LoopError`."""

    GENERIC = "generic"
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    RATE_LIMIT = "rate_limit"
    PROCESSOR = "processor"
    TIMEOUT = "timeout"
    NETWORK = "network"


class LoopError(Exception):
    """Raised for any failed API call.

    Constructing ``LoopError`` directly gives the generic kind, used for
    statuses the client does not recognise. The classmethods build the other
    kinds with their fixed codes and statuses.
    """

    def __init__(
        self,
        code: str,
        message: str,
        status: int,
        *,
        kind: ErrorKind = ErrorKind.GENERIC,
        processor_code: Optional[str] = None,
    ):
        self.kind = kind
        self.code = code
        self.message = message
        self.status = status
        self.processor_code = processor_code
        super().__init__(message)

    def __repr__(self) -> str:
        return (
            f"LoopError(kind={self.kind.value!r}, code={self.code!r}, "
            f"message={self.message!r}, status={self.status})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return the error in the backend's wire shape."""
        data: Dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "status": self.status,
        }
        if self.processor_code is not None:
            data["processorCode"] = self.processor_code
        return data

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def authentication(cls, message: str = "Invalid API key") -> "LoopError":
        return cls("authentication_error", message, 401, kind=ErrorKind.AUTHENTICATION)

    @classmethod
    def validation(cls, message: str) -> "LoopError":
        return cls("validation_error", message, 400, kind=ErrorKind.VALIDATION)

    @classmethod
    def not_found(cls, resource: str) -> "LoopError":
        return cls("not_found", f"{resource} not found", 404, kind=ErrorKind.NOT_FOUND)

    @classmethod
    def rate_limit(cls) -> "LoopError":
        return cls("rate_limit", "Too many requests", 429, kind=ErrorKind.RATE_LIMIT)

    @classmethod
    def processor(cls, message: str, processor_code: Optional[str] = None) -> "LoopError":
        """Payment processor rejection, e.g. a declined card."""
        return cls(
            "processor_error",
            message,
            400,
            kind=ErrorKind.PROCESSOR,
            processor_code=processor_code,
        )

    @classmethod
    def timeout(cls, message: str = "Request timed out") -> "LoopError":
        return cls("timeout", message, 408, kind=ErrorKind.TIMEOUT)

    @classmethod
    def network(cls, message: str = "Network error") -> "LoopError":
        """Transport failure before any response arrived. Status is 0."""
        return cls("network_error", message, 0, kind=ErrorKind.NETWORK)


class WebhookFailure(str, enum.Enum):
    """Why a webhook payload was rejected."""

    INVALID_FORMAT = "invalid_format"
    EXPIRED = "expired"
    INVALID_SIGNATURE = "invalid_signature"
    INVALID_PAYLOAD = "invalid_payload"


class WebhookVerificationError(Exception):
    """Raised when a webhook payload cannot be authenticated or parsed."""

    def __init__(self, reason: WebhookFailure, message: str):
        self.reason = reason
        self.message = message
        super().__init__(message)

    @classmethod
    def invalid_format(cls) -> "WebhookVerificationError":
        return cls(WebhookFailure.INVALID_FORMAT, "Invalid signature format")

    @classmethod
    def expired(cls) -> "WebhookVerificationError":
        return cls(WebhookFailure.EXPIRED, "Webhook timestamp too old")

    @classmethod
    def invalid_signature(cls) -> "WebhookVerificationError":
        return cls(WebhookFailure.INVALID_SIGNATURE, "Invalid webhook signature")

    @classmethod
    def invalid_payload(cls, detail: str) -> "WebhookVerificationError":
        return cls(WebhookFailure.INVALID_PAYLOAD, f"Invalid webhook payload: {detail}")
