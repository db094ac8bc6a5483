"""Order lifecycle operations exposed to the transport layer.

Each write runs as one Protean command, and therefore as one unit of work;
the returned aggregate is read back after the unit of work has committed.
"""

import json

from protean.utils.globals import current_domain

from pizzeria.order.modification import ModifyOrder
from pizzeria.order.placement import PlaceOrder
from pizzeria.order.queries import get_order
from pizzeria.order.removal import RemoveOrder


def create_order(customer: dict, pizza_items: list, delivery: bool = False) -> dict:
    """Place an order and return it with its customer and line items."""
    command = PlaceOrder(
        delivery=bool(delivery),
        customer=json.dumps(customer),
        pizza_items=json.dumps(pizza_items),
    )
    order_id = current_domain.process(command, asynchronous=False)
    return get_order(order_id)


def update_order(order_id, status: str | None = None, pizza_items: list | None = None) -> dict:
    """Change an order's status and/or replace its line items.

    Returns the order with its customer; line items are fetched separately
    through ``get_order``.
    """
    command = ModifyOrder(
        order_id=order_id,
        status=status,
        pizza_items=json.dumps(pizza_items) if pizza_items is not None else None,
    )
    current_domain.process(command, asynchronous=False)
    return get_order(order_id, include_items=False)


def remove_order(order_id) -> None:
    current_domain.process(RemoveOrder(order_id=order_id), asynchronous=False)
