"""Resource facades binding API paths onto the transport clients."""

from payloops.resources.checkout import AsyncCheckoutResource, CheckoutResource
from payloops.resources.orders import AsyncOrdersResource, OrdersResource

__all__ = [
    "AsyncCheckoutResource",
    "AsyncOrdersResource",
    "CheckoutResource",
    "OrdersResource",
]
