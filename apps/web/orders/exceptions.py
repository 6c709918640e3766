"""Order lifecycle exceptions."""

from collections.abc import Iterable
from decimal import Decimal

from apps.web.core.exceptions import ConflictError, InvalidInputError, NotFoundError


class OrderNotFoundError(NotFoundError):
    """Order does not exist."""

    def __init__(self, order_id: int) -> None:
        super().__init__(f"Order with ID {order_id} not found")
        self.order_id = order_id


class ItemsNotFoundError(NotFoundError):
    """One or more requested menu items do not exist."""

    def __init__(self, missing_ids: Iterable[int]) -> None:
        self.missing_ids = sorted(missing_ids)
        super().__init__(
            "Some menu items were not found: "
            + ", ".join(str(item_id) for item_id in self.missing_ids)
        )


class NoItemsError(InvalidInputError):
    """Request carried an empty item list."""

    def __init__(self) -> None:
        super().__init__("At least one item is required")


class InvalidQuantityError(InvalidInputError):
    """Requested quantity is outside 1..MAX_LINE_QUANTITY."""

    def __init__(self, item_id: int, quantity: int, maximum: int) -> None:
        super().__init__(
            f"Quantity for item {item_id} must be between 1 and {maximum} "
            f"(got {quantity})"
        )
        self.item_id = item_id
        self.quantity = quantity


class InvalidStatusError(InvalidInputError):
    """Status is not one of the OrderStatus values."""

    def __init__(self, status: str) -> None:
        super().__init__(f"Unknown order status '{status}'")
        self.status = status


class InsufficientQuantityError(ConflictError):
    """Cancellation asks for more units of an item than the order holds."""

    def __init__(self, item_id: int, requested: int, held: int) -> None:
        super().__init__(
            f"Cannot cancel {requested} of item {item_id}: only {held} in order"
        )
        self.item_id = item_id
        self.requested = requested
        self.held = held


class NothingToCancelError(ConflictError):
    """None of the requested items are part of the order."""

    def __init__(self, order_id: int) -> None:
        super().__init__(f"None of the requested items are in order {order_id}")
        self.order_id = order_id


class OrderTotalTooLargeError(InvalidInputError):
    """Order total would not fit the stored total column."""

    def __init__(self, total: Decimal, maximum: Decimal) -> None:
        super().__init__(f"Order total {total} exceeds the maximum of {maximum}")
        self.total = total
        self.maximum = maximum
