"""Admin registration for order models.

Orders are read only here: every change goes through the order services
so the event log stays the single record of what happened.
"""

import json
from collections.abc import Callable

from django.contrib import admin, messages
from django.db.models import QuerySet
from django.http import HttpRequest
from django.utils.html import format_html

from apps.web.core.exceptions import ServiceError
from apps.web.orders.models import Order, OrderLineItem, OrderStatus
from apps.web.orders.services import update_order_status


class OrderLineItemInline(admin.TabularInline):
    """Inline for line items within an order."""

    model = OrderLineItem
    extra = 0
    can_delete = False
    fields = ["menu_item", "item_name", "unit_price"]
    readonly_fields = ["menu_item", "item_name", "unit_price"]

    def has_add_permission(
        self, request: HttpRequest, obj: Order | None = None
    ) -> bool:
        return False


def _status_action(status: OrderStatus) -> Callable[..., None]:
    """Build an admin action that appends `status` to each selected order."""

    def action(
        modeladmin: admin.ModelAdmin, request: HttpRequest, queryset: QuerySet[Order]
    ) -> None:
        updated = 0
        for order in queryset:
            try:
                update_order_status(order.pk, status, {"source": "admin"})
                updated += 1
            except ServiceError as e:
                modeladmin.message_user(request, e.message, level=messages.ERROR)
        modeladmin.message_user(
            request, f"Marked {updated} order(s) as {status.label.lower()}."
        )

    action.__name__ = f"mark_{status.value.lower()}"
    return admin.action(
        description=f"Mark selected orders as {status.label.lower()}"
    )(action)


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """Admin for orders."""

    list_display = [
        "id",
        "customer_id",
        "qr_code_link",
        "status",
        "total",
        "created_at",
    ]
    search_fields = ["customer_id", "qr_code_link"]
    inlines = [OrderLineItemInline]
    readonly_fields = [
        "qr_code_link",
        "customer_id",
        "total",
        "status",
        "event_log_display",
        "created_at",
        "updated_at",
    ]
    exclude = ["event_log"]
    date_hierarchy = "created_at"
    actions = [
        _status_action(OrderStatus.PREPARING),
        _status_action(OrderStatus.READY_FOR_PICKUP),
        _status_action(OrderStatus.DELIVERED),
        _status_action(OrderStatus.COMPLETED),
        _status_action(OrderStatus.CANCELLED),
    ]

    def has_add_permission(self, request: HttpRequest) -> bool:
        return False

    @admin.display(description="Status")
    def status(self, obj: Order) -> str:
        return obj.status or "-"

    @admin.display(description="Event log")
    def event_log_display(self, obj: Order) -> str:
        return format_html(
            "<pre>{}</pre>", json.dumps(obj.event_log, indent=2, default=str)
        )
