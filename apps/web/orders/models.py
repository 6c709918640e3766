"""
Order models - the order aggregate, its line items, and its event log.

An order's status is never stored: it is the event kind of the last
entry in the append-only event log.
"""

from typing import Any

from django.core.serializers.json import DjangoJSONEncoder
from django.db import models
from django.utils import timezone

from apps.web.core.models import TimestampedModel
from apps.web.menu.models import MenuItem

from .managers import OrderManager

# Upper bound on units of one menu item per request; each unit is a line item row
MAX_LINE_QUANTITY = 99


class OrderStatus(models.TextChoices):
    """Order lifecycle events. The last one logged is the current status."""

    ORDER_CREATED = "ORDER_CREATED", "Order created"
    ITEMS_ADDED = "ITEMS_ADDED", "Items added"
    ITEMS_CANCELLED = "ITEMS_CANCELLED", "Items cancelled"
    PREPARING = "PREPARING", "Preparing"
    READY_FOR_PICKUP = "READY_FOR_PICKUP", "Ready for pickup"
    DELIVERED = "DELIVERED", "Delivered"
    COMPLETED = "COMPLETED", "Completed"
    CANCELLED = "CANCELLED", "Cancelled"


class Order(TimestampedModel):
    """
    Customer order (aggregate root).

    Owns its line items and event log. `total` is frozen at
    transaction time and never recomputed from live menu prices.
    """

    qr_code_link = models.CharField(
        max_length=500,
        help_text="QR code link the order was placed from (e.g. a table)",
    )
    customer_id = models.CharField(
        max_length=200,
        null=True,
        blank=True,
        help_text="Customer mnemonic, e.g. Table42-John",
    )
    total = models.DecimalField(max_digits=10, decimal_places=2, default=0)

    # Append-only list of {"timestamp", "event", "details"}
    event_log = models.JSONField(default=list, encoder=DjangoJSONEncoder)

    objects = OrderManager()

    class Meta:
        ordering = ["-created_at", "-pk"]

    def __str__(self) -> str:
        if self.customer_id:
            return f"Order {self.pk} - {self.customer_id}"
        return f"Order {self.pk}"

    @property
    def status(self) -> str | None:
        """Event kind of the most recent event-log entry."""
        if not self.event_log:
            return None
        return self.event_log[-1]["event"]

    @property
    def placed_at(self) -> str | None:
        """Timestamp of the first (ORDER_CREATED) event."""
        if not self.event_log:
            return None
        return self.event_log[0]["timestamp"]

    def append_event(self, event: str, details: dict[str, Any] | None = None) -> None:
        """Append one event to the log. Does not save."""
        self.event_log = [
            *self.event_log,
            {
                "timestamp": timezone.now().isoformat(),
                "event": str(event),
                "details": details if details is not None else {},
            },
        ]


class OrderLineItem(TimestampedModel):
    """
    One ordered unit of a menu item.

    An order for three burgers holds three line items. Name and price are
    a snapshot of the menu item at order time.
    """

    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name="items",
    )
    menu_item = models.ForeignKey(
        MenuItem,
        on_delete=models.PROTECT,
        related_name="order_lines",
    )
    item_name = models.CharField(max_length=200)
    unit_price = models.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        ordering = ["pk"]
        indexes = [
            models.Index(
                fields=["order", "menu_item"],
                name="orders_line_order_item_idx",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.item_name} ({self.unit_price})"
