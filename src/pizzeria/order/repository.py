"""Repositories for the Order, Customer and LineItem aggregates.

Customers and line items hold an ``order_id`` foreign key instead of being
declared as associations on Order; these finders are the explicit fetches
that join them back to their order.
"""

from pizzeria.domain import pizzeria
from pizzeria.order.customer import Customer
from pizzeria.order.line_item import LineItem
from pizzeria.order.order import Order


@pizzeria.repository(part_of=Order)
class OrderRepository:
    def newest_first(self, **filters) -> list[Order]:
        query = self._dao.query
        if filters:
            query = query.filter(**filters)
        return query.order_by("-created_at").all().items


@pizzeria.repository(part_of=Customer)
class CustomerRepository:
    def for_order(self, order_id) -> Customer | None:
        return self._dao.query.filter(order_id=str(order_id)).all().first

    def newest_first(self) -> list[Customer]:
        return self._dao.query.order_by("-created_at").all().items


@pizzeria.repository(part_of=LineItem)
class LineItemRepository:
    def for_order(self, order_id) -> list[LineItem]:
        return self._dao.query.filter(order_id=str(order_id)).order_by("created_at").all().items

    def remove_for_order(self, order_id) -> int:
        """Delete every line item of ``order_id``; returns how many were removed."""
        items = self.for_order(order_id)
        for item in items:
            self._dao.delete(item)
        return len(items)
