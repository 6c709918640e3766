"""
Menu item API views - CRUD endpoints for the item catalog.
"""

from django.http import HttpRequest, HttpResponse

from apps.web.core.decorators import json_api
from apps.web.core.responses import empty_response, json_response, parse_body
from apps.web.menu import services
from apps.web.menu.models import MenuItem
from apps.web.menu.serializers import (
    MenuItemCreateRequest,
    MenuItemSchema,
    MenuItemUpdateRequest,
)


def _serialize_menu_item(item: MenuItem) -> dict:
    """Serialize a MenuItem model to JSON-ready data."""
    return MenuItemSchema.model_validate(item).model_dump(mode="json")


@json_api(["GET", "POST"])
def menu_items(request: HttpRequest) -> HttpResponse:
    """
    GET /api/menu-items
    POST /api/menu-items

    GET: Returns all menu items.
    POST: Creates a menu item from a MenuItemCreateRequest body (201).
    """
    if request.method == "POST":
        create_request = parse_body(request, MenuItemCreateRequest)
        item = services.create_menu_item(create_request.model_dump())
        return json_response(_serialize_menu_item(item), status=201)

    items = services.find_all_menu_items()
    return json_response([_serialize_menu_item(item) for item in items])


@json_api(["GET", "PATCH", "DELETE"])
def menu_item_detail(request: HttpRequest, item_id: int) -> HttpResponse:
    """
    GET/PATCH/DELETE /api/menu-items/{item_id}

    GET: Returns the item (404 if missing).
    PATCH: Partially updates the item from a MenuItemUpdateRequest body.
    DELETE: Removes the item (204, or 409 while orders still reference it).
    """
    if request.method == "PATCH":
        update_request = parse_body(request, MenuItemUpdateRequest)
        item = services.update_menu_item(
            item_id,
            update_request.model_dump(exclude_unset=True, exclude_none=True),
        )
        return json_response(_serialize_menu_item(item))

    if request.method == "DELETE":
        services.remove_menu_item(item_id)
        return empty_response(status=204)

    item = services.find_menu_item(item_id)
    return json_response(_serialize_menu_item(item))
