"""
URL routing for order API endpoints.

Mounted under /api/. CORS-enabled for the admin frontend.
"""

from django.urls import path

from apps.web.orders import views

app_name = "orders"

urlpatterns = [
    path("menu-orders", views.orders, name="order_list"),
    path("menu-orders/<int:order_id>", views.order_detail, name="order_detail"),
    path("menu-orders/<int:order_id>/items", views.add_items, name="order_add_items"),
    path(
        "menu-orders/<int:order_id>/items/remove",
        views.cancel_items,
        name="order_cancel_items",
    ),
    path(
        "menu-orders/<int:order_id>/status",
        views.update_status,
        name="order_status",
    ),
]
