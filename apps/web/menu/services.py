"""
Menu catalog services - lookup and CRUD for menu items.

The order engine only depends on find_menu_items_by_ids().
"""

import logging
from collections.abc import Iterable
from typing import Any

from django.db.models import ProtectedError

from apps.web.menu.exceptions import MenuItemInUseError, MenuItemNotFoundError
from apps.web.menu.models import MenuItem

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "description", "price", "image_url", "qr_code_link")


def find_all_menu_items() -> list[MenuItem]:
    """Return every menu item."""
    return list(MenuItem.objects.all())


def find_menu_item(item_id: int) -> MenuItem:
    """
    Get a menu item by ID.

    Raises:
        MenuItemNotFoundError: If no item has that ID.
    """
    try:
        return MenuItem.objects.get(pk=item_id)
    except MenuItem.DoesNotExist as e:
        raise MenuItemNotFoundError(item_id) from e


def find_menu_items_by_ids(ids: Iterable[int]) -> list[MenuItem]:
    """
    Get the menu items matching a set of IDs.

    Only existing items are returned, in no particular order. Callers
    compare the result size with the number of distinct IDs requested
    to detect missing items.
    """
    return list(MenuItem.objects.filter(pk__in=set(ids)))


def create_menu_item(data: dict[str, Any]) -> MenuItem:
    """Create a menu item from validated field data."""
    item = MenuItem.objects.create(
        **{field: data[field] for field in EDITABLE_FIELDS if field in data}
    )
    logger.info("Created menu item %s (%s)", item.pk, item.name)
    return item


def update_menu_item(item_id: int, data: dict[str, Any]) -> MenuItem:
    """
    Apply a partial update to a menu item.

    Only fields present in data are changed. Existing orders keep the
    name and price they were placed with.

    Raises:
        MenuItemNotFoundError: If no item has that ID.
    """
    item = find_menu_item(item_id)

    changed = [field for field in EDITABLE_FIELDS if field in data]
    for field in changed:
        setattr(item, field, data[field])

    if changed:
        item.save(update_fields=[*changed, "updated_at"])
        logger.info("Updated menu item %s: %s", item.pk, ", ".join(changed))

    return item


def remove_menu_item(item_id: int) -> None:
    """
    Delete a menu item.

    Raises:
        MenuItemNotFoundError: If no item has that ID.
        MenuItemInUseError: If order line items still reference the item.
    """
    try:
        deleted, _ = MenuItem.objects.filter(pk=item_id).delete()
    except ProtectedError as e:
        raise MenuItemInUseError(item_id) from e

    if deleted == 0:
        raise MenuItemNotFoundError(item_id)

    logger.info("Deleted menu item %s", item_id)
