import json

import pytest
from protean.utils.globals import current_domain


@pytest.fixture()
def nothing_persisted():
    """Assert that no order, customer or line item has been stored."""
    from pizzeria.order.customer import Customer
    from pizzeria.order.line_item import LineItem
    from pizzeria.order.order import Order

    def _check():
        for aggregate_cls in (Order, Customer, LineItem):
            records = current_domain.repository_for(aggregate_cls)._dao.query.all().items
            assert records == [], f"unexpected {aggregate_cls.__name__} records: {records}"

    return _check


@pytest.fixture()
def place_order(customer_details):
    """Run PlaceOrder through the domain and return the new order id."""
    from pizzeria.order.placement import PlaceOrder

    def _place(pizza_items, customer=None, delivery=False):
        command = PlaceOrder(
            delivery=delivery,
            customer=json.dumps(customer if customer is not None else customer_details),
            pizza_items=json.dumps(pizza_items),
        )
        return current_domain.process(command, asynchronous=False)

    return _place


@pytest.fixture()
def fail_writes_to(_pizzeria_domain, monkeypatch):
    """Make ``repository.add`` raise for one aggregate, simulating a store failure.

    The failure is injected on the repository instance handed out by the
    domain, so handlers hit it through their normal ``repository_for`` call.
    """

    def _fail(aggregate_cls, message="connection reset by peer"):
        original = _pizzeria_domain.repository_for

        def failing_add(item):
            raise RuntimeError(message)

        def repository_for(element_cls):
            repo = original(element_cls)
            if element_cls is aggregate_cls:
                monkeypatch.setattr(repo, "add", failing_add)
            return repo

        monkeypatch.setattr(_pizzeria_domain, "repository_for", repository_for)

    return _fail


@pytest.fixture()
def modify_order():
    """Run ModifyOrder through the domain."""
    from pizzeria.order.modification import ModifyOrder

    def _modify(order_id, status=None, pizza_items=None):
        command = ModifyOrder(
            order_id=order_id,
            status=status,
            pizza_items=json.dumps(pizza_items) if pizza_items is not None else None,
        )
        return current_domain.process(command, asynchronous=False)

    return _modify
