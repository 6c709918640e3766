"""
Pydantic schemas for order API requests and responses.

These schemas define the public API contract for orders.
"""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from apps.web.orders.models import MAX_LINE_QUANTITY

# =============================================================================
# Requests
# =============================================================================


class OrderItemQuantitySchema(BaseModel):
    """A menu item and how many units of it."""

    id: int
    quantity: int = Field(..., ge=1, le=MAX_LINE_QUANTITY)


class OrderCreateRequest(BaseModel):
    """Request body for POST /api/menu-orders."""

    qr_code_link: str = Field(..., min_length=1, max_length=500)
    customer_id: str | None = Field(default=None, max_length=200)
    items: list[OrderItemQuantitySchema] = Field(..., min_length=1)
    observation: str | None = Field(default=None, max_length=1000)


class OrderItemsChangeRequest(BaseModel):
    """Request body for adding items to or cancelling items from an order."""

    items: list[OrderItemQuantitySchema] = Field(..., min_length=1)
    observation: str | None = Field(default=None, max_length=1000)


class OrderStatusUpdateRequest(BaseModel):
    """Request body for PATCH /api/menu-orders/{order_id}/status."""

    status: str
    details: dict[str, Any] | None = None


# =============================================================================
# Responses
# =============================================================================


class OrderLineItemSchema(BaseModel):
    """One ordered unit of a menu item (snapshot at order time)."""

    id: int  # menu item ID
    name: str
    unit_price: Decimal


class OrderEventSchema(BaseModel):
    """An event-log entry."""

    timestamp: str
    event: str
    details: Any


class OrderSchema(BaseModel):
    """An order with its line items and event log."""

    id: int
    qr_code_link: str
    customer_id: str | None
    items: list[OrderLineItemSchema]
    total: Decimal
    status: str | None
    placed_at: str | None
    event_log: list[OrderEventSchema]
