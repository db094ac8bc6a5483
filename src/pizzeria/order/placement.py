"""Order placement — command and handler."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Boolean, Text
from protean.utils.globals import current_domain

from pizzeria.domain import pizzeria
from pizzeria.order.customer import Customer
from pizzeria.order.line_item import LineItem, build_line_items, select_line_items
from pizzeria.order.order import Order
from pizzeria.utils.logging import get_logger

logger = get_logger(__name__)


@pizzeria.command(part_of="Order")
class PlaceOrder:
    delivery = Boolean(default=False)
    customer = Text(required=True)  # JSON: customer details dict
    pizza_items = Text(required=True)  # JSON: list of selection dicts


@pizzeria.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        customer_details = json.loads(command.customer) if isinstance(command.customer, str) else command.customer
        if not isinstance(customer_details, dict):
            raise ValidationError({"customer": ["Customer details are required."]})

        selections = json.loads(command.pizza_items) if isinstance(command.pizza_items, str) else command.pizza_items
        selected = select_line_items(selections)

        # Build and validate the whole aggregate before the first write
        order = Order.place(delivery=command.delivery)
        customer = Customer.for_order(order.id, customer_details)
        line_items = build_line_items(order.id, selected)
        order.record_placement(customer_id=customer.id, item_count=len(line_items))

        current_domain.repository_for(Order).add(order)
        current_domain.repository_for(Customer).add(customer)
        line_item_repo = current_domain.repository_for(LineItem)
        for line_item in line_items:
            line_item_repo.add(line_item)

        logger.info(
            "order_placed",
            order_id=str(order.id),
            customer_id=str(customer.id),
            delivery=order.delivery,
            item_count=len(line_items),
            dropped_count=len(selections) - len(selected),
        )
        return str(order.id)
