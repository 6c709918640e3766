"""Admin registration for menu models."""

from django.contrib import admin

from apps.web.menu.models import MenuItem


@admin.register(MenuItem)
class MenuItemAdmin(admin.ModelAdmin):
    """Admin for menu items."""

    list_display = ["name", "price", "updated_at"]
    search_fields = ["name", "description"]
    readonly_fields = ["created_at", "updated_at"]

    fieldsets = [
        (None, {"fields": ["name", "description", "price"]}),
        ("Media", {"fields": ["image_url", "qr_code_link"]}),
        ("Timestamps", {"fields": ["created_at", "updated_at"]}),
    ]
