"""
Custom manager for the Order aggregate.

OrderManager is the order store: every read of an order used by the
lifecycle engine goes through it.
"""

from typing import TYPE_CHECKING

from django.db import models

if TYPE_CHECKING:
    from .models import Order


class OrderManager(models.Manager["Order"]):
    """
    Manager with aggregate-aware loaders.

    Usage in services:
        # Read paths - line items prefetched
        order = Order.objects.with_items().get(pk=order_id)

        # Mutation paths - inside transaction.atomic()
        order = Order.objects.locked(order_id)
    """

    def with_items(self) -> models.QuerySet["Order"]:
        """Queryset with the order's line items prefetched."""
        return self.get_queryset().prefetch_related("items")

    def locked(self, order_id: int) -> "Order | None":
        """
        Load one order with its row locked for a read-modify-write cycle.

        Must be called inside transaction.atomic(). Concurrent mutations of
        the same order wait for the lock instead of overwriting each other.

        Returns:
            The order, or None if no order has that ID.
        """
        return self.get_queryset().select_for_update().filter(pk=order_id).first()
