"""Pydantic models for payloads delivered by PayLoops."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class WebhookEvent(BaseModel):
    """A webhook notification about an order.

    Attributes are snake_case and read from the camelCase wire keys.
    Values are kept exactly as sent, with no type coercion. Keys the SDK
    does not know about are kept as extras.
    Build instances with :func:`payloops.webhooks.verify` (or
    :func:`payloops.webhooks.construct_event` for unverified inspection).
    """

    model_config = ConfigDict(extra="allow")

    id: Any = None
    event_type: Any = Field(None, alias="eventType")
    order_id: Any = Field(None, alias="orderId")
    external_id: Any = Field(None, alias="externalId")
    amount: Any = None
    currency: Any = None
    status: Any = None
    processor: Any = None
    created_at: Any = Field(None, alias="createdAt")
    payload: Any = Field(default_factory=dict)

    def to_wire(self) -> Dict[str, Any]:
        """Return the event in its camelCase wire shape, unset fields omitted."""
        return self.model_dump(by_alias=True, exclude_unset=True)
