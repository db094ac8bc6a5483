"""Order removal — deletes an order together with everything it owns."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from pizzeria.domain import pizzeria
from pizzeria.order.customer import Customer
from pizzeria.order.line_item import LineItem
from pizzeria.order.order import Order
from pizzeria.utils.logging import get_logger

logger = get_logger(__name__)


@pizzeria.command(part_of="Order")
class RemoveOrder:
    order_id = Identifier(required=True)


@pizzeria.command_handler(part_of=Order)
class RemoveOrderHandler:
    @handle(RemoveOrder)
    def remove_order(self, command):
        order_repo = current_domain.repository_for(Order)
        order = order_repo.get(command.order_id)

        # Owned records go first so no customer or line item outlives its order
        items_removed = current_domain.repository_for(LineItem).remove_for_order(order.id)

        customer_repo = current_domain.repository_for(Customer)
        customer = customer_repo.for_order(order.id)
        if customer is not None:
            customer_repo._dao.delete(customer)

        order_repo._dao.delete(order)

        logger.info(
            "order_removed",
            order_id=str(order.id),
            status=order.status,
            items_removed=items_removed,
        )
