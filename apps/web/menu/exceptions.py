"""Menu catalog exceptions."""

from apps.web.core.exceptions import ConflictError, NotFoundError


class MenuItemNotFoundError(NotFoundError):
    """Menu item does not exist."""

    def __init__(self, item_id: int) -> None:
        super().__init__(f"Menu item with ID {item_id} not found")
        self.item_id = item_id


class MenuItemInUseError(ConflictError):
    """Menu item is still referenced by order line items."""

    def __init__(self, item_id: int) -> None:
        super().__init__(
            f"Menu item with ID {item_id} is part of existing orders and cannot be deleted"
        )
        self.item_id = item_id
