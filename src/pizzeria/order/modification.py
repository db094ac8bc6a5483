"""Order modification — status changes and line item replacement."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from pizzeria.domain import pizzeria
from pizzeria.order.line_item import LineItem, build_line_items, select_line_items
from pizzeria.order.order import Order, parse_status
from pizzeria.utils.logging import get_logger

logger = get_logger(__name__)


@pizzeria.command(part_of="Order")
class ModifyOrder:
    order_id = Identifier(required=True)
    status = String(max_length=20)
    pizza_items = Text()  # JSON: list of selection dicts, replaces the current set


@pizzeria.command_handler(part_of=Order)
class ModifyOrderHandler:
    @handle(ModifyOrder)
    def modify_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)

        # A delivered order is closed, whatever the request carries
        order.ensure_modifiable()

        if not command.status and command.pizza_items is None:
            raise ValidationError({"_entity": ["No update data found."]})

        if command.status:
            parse_status(command.status)

        replacement = None
        if command.pizza_items is not None:
            selections = (
                json.loads(command.pizza_items) if isinstance(command.pizza_items, str) else command.pizza_items
            )
            replacement = build_line_items(order.id, select_line_items(selections))

        previous_status = order.status
        removed_count = 0
        if replacement is not None:
            line_item_repo = current_domain.repository_for(LineItem)
            removed_count = line_item_repo.remove_for_order(order.id)
            for line_item in replacement:
                line_item_repo.add(line_item)
            order.replace_items(len(replacement))

        status_changed = bool(command.status) and order.change_status(command.status)

        repo.add(order)

        logger.info(
            "order_modified",
            order_id=str(order.id),
            previous_status=previous_status,
            status=order.status,
            status_changed=status_changed,
            items_removed=removed_count,
            items_added=len(replacement) if replacement is not None else 0,
        )
        return str(order.id)
