"""Tests for the order admin status actions."""

from unittest.mock import MagicMock

from django.contrib import admin
from django.test import RequestFactory

import pytest

from apps.web.orders.admin import OrderAdmin
from apps.web.orders.models import Order, OrderStatus

from .factories import OrderFactory


@pytest.mark.django_db
class TestOrderAdminActions:
    """Status actions append events through the order services."""

    def _action(self, name: str):
        return next(
            action
            for action in OrderAdmin.actions
            if action.__name__ == name
        )

    def test_mark_preparing(self) -> None:
        """Every selected order gets a PREPARING event tagged with the source."""
        first, second = OrderFactory(), OrderFactory()
        modeladmin = MagicMock(spec=OrderAdmin(Order, admin.site))
        request = RequestFactory().post("/admin/orders/order/")

        self._action("mark_preparing")(
            modeladmin, request, Order.objects.filter(pk__in=[first.pk, second.pk])
        )

        for order in (first, second):
            order.refresh_from_db()
            assert order.status == OrderStatus.PREPARING
            assert order.event_log[-1]["details"] == {"source": "admin"}
            assert len(order.event_log) == 2
        modeladmin.message_user.assert_called_once_with(
            request, "Marked 2 order(s) as preparing."
        )

    def test_actions_cover_kitchen_statuses(self) -> None:
        """One action per status staff can set."""
        names = {action.__name__ for action in OrderAdmin.actions}

        assert names == {
            "mark_preparing",
            "mark_ready_for_pickup",
            "mark_delivered",
            "mark_completed",
            "mark_cancelled",
        }

    def test_orders_cannot_be_added_in_admin(self) -> None:
        """Orders are only created through the API."""
        request = RequestFactory().get("/admin/orders/order/add/")

        assert OrderAdmin(Order, admin.site).has_add_permission(request) is False
