"""Domain events for the Order aggregate."""

from protean.fields import Boolean, DateTime, Identifier, Integer, String

from pizzeria.domain import pizzeria


@pizzeria.event(part_of="Order")
class OrderPlaced:
    """A customer placed a new order with at least one pizza selection."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    delivery = Boolean(default=False)
    item_count = Integer(required=True)
    placed_at = DateTime(required=True)


@pizzeria.event(part_of="Order")
class OrderItemsReplaced:
    """The pizza selections of an order were replaced wholesale."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    item_count = Integer(required=True)
    replaced_at = DateTime(required=True)


@pizzeria.event(part_of="Order")
class OrderStatusChanged:
    """An order moved from one status to another."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    changed_at = DateTime(required=True)
