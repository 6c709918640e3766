"""
URL routing for menu item API endpoints.

Mounted under /api/.
"""

from django.urls import path

from apps.web.menu import views

app_name = "menu"

urlpatterns = [
    path("menu-items", views.menu_items, name="menu_item_list"),
    path("menu-items/<int:item_id>", views.menu_item_detail, name="menu_item_detail"),
]
