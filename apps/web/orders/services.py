"""
Order lifecycle services - creation, item changes, and status events.

Every mutation:
1. Validates the request fully (quantities, item existence, held counts)
2. Applies the change to the aggregate
3. Appends exactly one event to the order's event log
4. Saves once, inside a transaction with the order row locked

Nothing is written when validation fails.
"""

import logging
from collections import defaultdict
from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from django.db import transaction

from apps.web.menu.models import MenuItem
from apps.web.menu.services import find_menu_items_by_ids
from apps.web.orders.exceptions import (
    InsufficientQuantityError,
    InvalidQuantityError,
    InvalidStatusError,
    ItemsNotFoundError,
    NoItemsError,
    NothingToCancelError,
    OrderNotFoundError,
    OrderTotalTooLargeError,
)
from apps.web.orders.models import (
    MAX_LINE_QUANTITY,
    Order,
    OrderLineItem,
    OrderStatus,
)

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def _requested_quantities(items: list[dict[str, Any]]) -> dict[int, int]:
    """
    Collapse request items into {menu_item_id: quantity}.

    Repeated IDs are summed; first-seen order is kept. The summed quantity
    per ID is capped at MAX_LINE_QUANTITY.

    Raises:
        NoItemsError: If items is empty.
        InvalidQuantityError: If any quantity is below 1 or above the cap.
    """
    if not items:
        raise NoItemsError()

    quantities: dict[int, int] = {}
    for item in items:
        item_id = int(item["id"])
        quantity = int(item["quantity"])
        if quantity < 1:
            raise InvalidQuantityError(item_id, quantity, MAX_LINE_QUANTITY)
        quantities[item_id] = quantities.get(item_id, 0) + quantity
        if quantities[item_id] > MAX_LINE_QUANTITY:
            raise InvalidQuantityError(
                item_id, quantities[item_id], MAX_LINE_QUANTITY
            )

    return quantities


def _resolve_menu_items(item_ids: Iterable[int]) -> dict[int, MenuItem]:
    """
    Look up menu items by ID, failing if any are missing.

    Raises:
        ItemsNotFoundError: If the catalog returns fewer items than requested.
    """
    wanted = set(item_ids)
    menu_items = {item.pk: item for item in find_menu_items_by_ids(wanted)}

    if len(menu_items) != len(wanted):
        raise ItemsNotFoundError(wanted - set(menu_items))

    return menu_items


def _build_line_items(
    order: Order,
    quantities: dict[int, int],
    menu_items: dict[int, MenuItem],
) -> list[OrderLineItem]:
    """Materialize one line item per ordered unit, snapshotting name and price."""
    return [
        OrderLineItem(
            order=order,
            menu_item=menu_items[item_id],
            item_name=menu_items[item_id].name,
            unit_price=menu_items[item_id].price,
        )
        for item_id, quantity in quantities.items()
        for _ in range(quantity)
    ]


def _sum_prices(lines: Iterable[OrderLineItem]) -> Decimal:
    """Sum the unit prices of line items."""
    return sum((line.unit_price for line in lines), Decimal("0")).quantize(CENTS)


def _event_details(
    breakdown: list[dict[str, Any]],
    observation: str | None,
    **extra: Any,
) -> dict[str, Any]:
    """Build the details payload shared by item events."""
    return {
        "items": breakdown,
        "total_items": sum(entry["quantity"] for entry in breakdown),
        "observation": observation,
        **extra,
    }


def _check_total_fits(total: Decimal) -> None:
    """
    Ensure a total fits the Order.total column.

    Raises:
        OrderTotalTooLargeError: If total has more integer digits than stored.
    """
    field = Order._meta.get_field("total")
    limit = Decimal(10) ** (field.max_digits - field.decimal_places)
    if total >= limit:
        raise OrderTotalTooLargeError(total, limit - CENTS)


def _get_order_for_update(order_id: int) -> Order:
    """
    Load and lock an order. Must run inside transaction.atomic().

    Raises:
        OrderNotFoundError: If no order has that ID.
    """
    order = Order.objects.locked(order_id)
    if order is None:
        raise OrderNotFoundError(order_id)
    return order


def find_all_orders() -> list[Order]:
    """Return every order with its line items."""
    return list(Order.objects.with_items())


def find_order(order_id: int) -> Order:
    """
    Get an order with its line items.

    Raises:
        OrderNotFoundError: If no order has that ID.
    """
    try:
        return Order.objects.with_items().get(pk=order_id)
    except Order.DoesNotExist as e:
        raise OrderNotFoundError(order_id) from e


def create_order(
    qr_code_link: str,
    items: list[dict[str, Any]],
    customer_id: str | None = None,
    observation: str | None = None,
) -> Order:
    """
    Create an order from requested item quantities.

    Prices are taken from the catalog now and frozen into the order's
    total and line item snapshots.

    Args:
        qr_code_link: QR code link the order was placed from.
        items: List of {"id": menu_item_id, "quantity": n}.
        customer_id: Optional customer mnemonic.
        observation: Optional note stored on the ORDER_CREATED event.

    Returns:
        The stored order with line items.

    Raises:
        NoItemsError: If items is empty.
        InvalidQuantityError: If any quantity is below 1 or above the cap.
        ItemsNotFoundError: If any menu item ID is unknown.
        OrderTotalTooLargeError: If the total does not fit the total column.
    """
    quantities = _requested_quantities(items)
    menu_items = _resolve_menu_items(quantities)

    total = sum(
        (
            menu_items[item_id].price * quantity
            for item_id, quantity in quantities.items()
        ),
        Decimal("0"),
    ).quantize(CENTS)
    _check_total_fits(total)
    breakdown = [
        {"id": item_id, "quantity": quantity, "name": menu_items[item_id].name}
        for item_id, quantity in quantities.items()
    ]

    with transaction.atomic():
        order = Order(
            qr_code_link=qr_code_link,
            customer_id=customer_id or None,
            total=total,
        )
        order.append_event(
            OrderStatus.ORDER_CREATED, _event_details(breakdown, observation)
        )
        order.save()
        OrderLineItem.objects.bulk_create(
            _build_line_items(order, quantities, menu_items)
        )

    logger.info(
        "Created order %s (%d items, total %s)",
        order.pk,
        sum(quantities.values()),
        total,
    )
    return find_order(order.pk)


def add_items_to_order(
    order_id: int,
    items: list[dict[str, Any]],
    observation: str | None = None,
) -> Order:
    """
    Add menu items to an existing order.

    Items the order already holds are skipped: adding never duplicates an
    item that is present. New items get one line per requested unit, and
    only the lines actually added are charged.

    Raises:
        NoItemsError: If items is empty.
        InvalidQuantityError: If any quantity is below 1 or above the cap.
        OrderNotFoundError: If the order does not exist.
        ItemsNotFoundError: If any menu item ID is unknown.
        OrderTotalTooLargeError: If the new total does not fit the total column.
    """
    quantities = _requested_quantities(items)

    with transaction.atomic():
        order = _get_order_for_update(order_id)
        menu_items = _resolve_menu_items(quantities)

        held_ids = set(order.items.values_list("menu_item_id", flat=True))
        skipped_ids = [item_id for item_id in quantities if item_id in held_ids]
        added = {
            item_id: quantity
            for item_id, quantity in quantities.items()
            if item_id not in held_ids
        }

        new_lines = _build_line_items(order, added, menu_items)
        additional_total = _sum_prices(new_lines)
        new_total = (order.total + additional_total).quantize(CENTS)
        _check_total_fits(new_total)
        OrderLineItem.objects.bulk_create(new_lines)

        order.total = new_total
        breakdown = [
            {"id": item_id, "quantity": quantity, "name": menu_items[item_id].name}
            for item_id, quantity in added.items()
        ]
        order.append_event(
            OrderStatus.ITEMS_ADDED,
            _event_details(breakdown, observation, skipped_ids=skipped_ids),
        )
        order.save(update_fields=["total", "event_log", "updated_at"])

    if skipped_ids:
        logger.info(
            "Order %s already holds items %s - not added again", order_id, skipped_ids
        )
    logger.info(
        "Added %d items to order %s (+%s)",
        len(new_lines),
        order_id,
        additional_total,
    )
    return find_order(order_id)


def cancel_items_from_order(
    order_id: int,
    items: list[dict[str, Any]],
    observation: str | None = None,
) -> Order:
    """
    Cancel units of items from an order and refund their snapshot price.

    The whole request is validated before anything changes: if any item
    asks for more units than the order holds, nothing is cancelled.
    Requested items the order does not hold are ignored, unless none of
    the requested items are held.

    Raises:
        NoItemsError: If items is empty.
        InvalidQuantityError: If any quantity is below 1 or above the cap.
        OrderNotFoundError: If the order does not exist.
        InsufficientQuantityError: If a quantity exceeds the held count.
        NothingToCancelError: If no requested item is in the order.
    """
    quantities = _requested_quantities(items)

    with transaction.atomic():
        order = _get_order_for_update(order_id)

        held: dict[int, list[OrderLineItem]] = defaultdict(list)
        for line in order.items.all():
            held[line.menu_item_id].append(line)

        for item_id, quantity in quantities.items():
            if item_id in held and quantity > len(held[item_id]):
                raise InsufficientQuantityError(item_id, quantity, len(held[item_id]))

        cancelled = {
            item_id: quantity
            for item_id, quantity in quantities.items()
            if item_id in held
        }
        if not cancelled:
            raise NothingToCancelError(order_id)

        # Same-ID lines are interchangeable snapshots; take from the front.
        removed = [
            line
            for item_id, quantity in cancelled.items()
            for line in held[item_id][:quantity]
        ]
        refund_amount = _sum_prices(removed)
        OrderLineItem.objects.filter(pk__in=[line.pk for line in removed]).delete()

        order.total = (order.total - refund_amount).quantize(CENTS)
        breakdown = [
            {"id": item_id, "quantity": quantity, "name": held[item_id][0].item_name}
            for item_id, quantity in cancelled.items()
        ]
        order.append_event(
            OrderStatus.ITEMS_CANCELLED,
            _event_details(
                breakdown,
                observation,
                refund_amount=str(refund_amount),
                skipped_ids=[item_id for item_id in quantities if item_id not in held],
            ),
        )
        order.save(update_fields=["total", "event_log", "updated_at"])

    logger.info(
        "Cancelled %d items from order %s (refund %s)",
        len(removed),
        order_id,
        refund_amount,
    )
    return find_order(order_id)


def update_order_status(
    order_id: int,
    status: str,
    details: dict[str, Any] | None = None,
) -> Order:
    """
    Append a status event to an order.

    Any status may follow any other; no transition rules are enforced.

    Raises:
        InvalidStatusError: If status is not an OrderStatus value.
        OrderNotFoundError: If the order does not exist.
    """
    if status not in OrderStatus.values:
        raise InvalidStatusError(status)

    with transaction.atomic():
        order = _get_order_for_update(order_id)
        order.append_event(status, details)
        order.save(update_fields=["event_log", "updated_at"])

    logger.info("Order %s status -> %s", order_id, status)
    return find_order(order_id)


def remove_order(order_id: int) -> None:
    """
    Delete an order and its line items.

    Raises:
        OrderNotFoundError: If no order was deleted.
    """
    deleted, _ = Order.objects.filter(pk=order_id).delete()

    if deleted == 0:
        raise OrderNotFoundError(order_id)

    logger.info("Deleted order %s", order_id)
