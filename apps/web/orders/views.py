"""
Order API views - the HTTP surface of the order lifecycle services.

Views parse and validate request bodies, call one service operation,
and serialize the resulting order. Service errors are mapped to status
codes by the json_api decorator.
"""

from django.http import HttpRequest, HttpResponse

from apps.web.core.decorators import json_api
from apps.web.core.responses import empty_response, json_response, parse_body
from apps.web.orders import services
from apps.web.orders.models import Order
from apps.web.orders.serializers import (
    OrderCreateRequest,
    OrderEventSchema,
    OrderItemsChangeRequest,
    OrderLineItemSchema,
    OrderSchema,
    OrderStatusUpdateRequest,
)


def _serialize_order(order: Order) -> dict:
    """Serialize an Order model with line items and event log."""
    response = OrderSchema(
        id=order.pk,
        qr_code_link=order.qr_code_link,
        customer_id=order.customer_id,
        items=[
            OrderLineItemSchema(
                id=line.menu_item_id,
                name=line.item_name,
                unit_price=line.unit_price,
            )
            for line in order.items.all()
        ],
        total=order.total,
        status=order.status,
        placed_at=order.placed_at,
        event_log=[OrderEventSchema(**entry) for entry in order.event_log],
    )
    return response.model_dump(mode="json")


@json_api(["GET", "POST"])
def orders(request: HttpRequest) -> HttpResponse:
    """
    GET /api/menu-orders
    POST /api/menu-orders

    GET: Returns all orders with items.
    POST: Creates an order from an OrderCreateRequest body (201).
    """
    if request.method == "POST":
        create_request = parse_body(request, OrderCreateRequest)
        order = services.create_order(
            qr_code_link=create_request.qr_code_link,
            items=[item.model_dump() for item in create_request.items],
            customer_id=create_request.customer_id,
            observation=create_request.observation,
        )
        return json_response(_serialize_order(order), status=201)

    return json_response(
        [_serialize_order(order) for order in services.find_all_orders()]
    )


@json_api(["GET", "DELETE"])
def order_detail(request: HttpRequest, order_id: int) -> HttpResponse:
    """
    GET/DELETE /api/menu-orders/{order_id}

    GET: Returns the order (404 if missing).
    DELETE: Hard-deletes the order (204, or 404 if missing).
    """
    if request.method == "DELETE":
        services.remove_order(order_id)
        return empty_response(status=204)

    return json_response(_serialize_order(services.find_order(order_id)))


@json_api(["POST"])
def add_items(request: HttpRequest, order_id: int) -> HttpResponse:
    """
    POST /api/menu-orders/{order_id}/items

    Adds items to the order. Items already in the order are not added again.
    """
    change_request = parse_body(request, OrderItemsChangeRequest)
    order = services.add_items_to_order(
        order_id,
        [item.model_dump() for item in change_request.items],
        observation=change_request.observation,
    )
    return json_response(_serialize_order(order))


@json_api(["POST"])
def cancel_items(request: HttpRequest, order_id: int) -> HttpResponse:
    """
    POST /api/menu-orders/{order_id}/items/remove

    Cancels item units from the order and refunds their price.
    409 if more units are requested than held, or nothing matches.
    """
    change_request = parse_body(request, OrderItemsChangeRequest)
    order = services.cancel_items_from_order(
        order_id,
        [item.model_dump() for item in change_request.items],
        observation=change_request.observation,
    )
    return json_response(_serialize_order(order))


@json_api(["PATCH"])
def update_status(request: HttpRequest, order_id: int) -> HttpResponse:
    """
    PATCH /api/menu-orders/{order_id}/status

    Appends a status event to the order's event log.
    """
    status_request = parse_body(request, OrderStatusUpdateRequest)
    order = services.update_order_status(
        order_id,
        status_request.status,
        status_request.details,
    )
    return json_response(_serialize_order(order))
