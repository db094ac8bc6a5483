"""Read side of the pizzeria domain.

Orders, customers and line items live in their own tables; the functions here
fetch them separately and assemble the order aggregate explicitly. Listings
are newest first.
"""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from pizzeria.catalog.pizza import PizzaType
from pizzeria.order.customer import Customer
from pizzeria.order.line_item import LineItem
from pizzeria.order.order import Order, parse_status


def customer_payload(customer: Customer) -> dict:
    return {
        "id": str(customer.id),
        "first_name": customer.first_name,
        "last_name": customer.last_name,
        "street_address": customer.street_address,
        "city": customer.city,
        "province": customer.province,
        "postal_code": customer.postal_code,
        "email": customer.email,
        "phone": customer.phone,
        "order_id": str(customer.order_id),
        "created_at": customer.created_at,
    }


def line_item_payload(line_item: LineItem) -> dict:
    return {
        "id": str(line_item.id),
        "quantity": line_item.quantity,
        "size": line_item.size,
        "pizza_type_id": str(line_item.pizza_type_id),
        "order_id": str(line_item.order_id),
    }


def order_payload(order: Order, customer: Customer | None, line_items=None) -> dict:
    """Shape an order and its owned records into one aggregate dict.

    ``pizza_items`` is only present when ``line_items`` is given, so listings
    and update responses stay free of line item data.
    """
    payload = {
        "id": str(order.id),
        "status": order.status,
        "delivery": order.delivery,
        "created_at": order.created_at,
        "updated_at": order.updated_at,
        "customer": customer_payload(customer) if customer is not None else None,
    }
    if line_items is not None:
        payload["pizza_items"] = [line_item_payload(item) for item in line_items]
    return payload


def get_order(order_id, include_items: bool = True) -> dict:
    """Fetch one order aggregate.

    Raises ``ObjectNotFoundError`` for an unknown ``order_id``; line items are
    only looked up once the order is known to exist.
    """
    order = current_domain.repository_for(Order).get(order_id)
    customer = current_domain.repository_for(Customer).for_order(order.id)

    line_items = None
    if include_items:
        line_items = current_domain.repository_for(LineItem).for_order(order.id)

    return order_payload(order, customer, line_items)


def list_orders(status=None, customer_id=None) -> list[dict]:
    filters = {}
    if status:
        filters["status"] = parse_status(status).value

    customer_repo = current_domain.repository_for(Customer)
    if customer_id:
        try:
            customer = customer_repo.get(customer_id)
        except ObjectNotFoundError:
            return []
        filters["id"] = str(customer.order_id)

    orders = current_domain.repository_for(Order).newest_first(**filters)
    return [order_payload(order, customer_repo.for_order(order.id)) for order in orders]


def list_customers() -> list[dict]:
    return [customer_payload(customer) for customer in current_domain.repository_for(Customer).newest_first()]


def list_pizza_types() -> list[str]:
    return [pizza_type.name for pizza_type in current_domain.repository_for(PizzaType).newest_first()]
