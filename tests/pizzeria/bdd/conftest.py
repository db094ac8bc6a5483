"""Shared BDD fixtures and step definitions for the Pizzeria domain."""

import pytest
from pizzeria.catalog.service import create_pizza_type
from pizzeria.order.queries import get_order
from pizzeria.order.service import create_order, update_order
from protean.exceptions import ObjectNotFoundError, ValidationError
from pytest_bdd import given, parsers, then


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


@pytest.fixture()
def attempt(error):
    """Run an operation, capturing domain errors into ``error``."""

    def _attempt(operation, *args, **kwargs):
        try:
            return operation(*args, **kwargs)
        except (ValidationError, ObjectNotFoundError) as exc:
            error["exc"] = exc
            return None

    return _attempt


@pytest.fixture()
def pizzas():
    """Pizza type ids by name, filled in by Given steps."""
    return {}


@pytest.fixture()
def make_selection(pizzas):
    """Build a selection dict from a pizza name."""

    def _selection(quantity, size, name):
        # Unknown names still produce a selection so the catalog check can reject it
        return {"quantity": int(quantity), "size": size, "pizza_type_id": pizzas.get(name, f"unknown-{name}")}

    return _selection


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the shop makes a "{name}" pizza'))
def shop_makes_pizza(pizzas, name):
    pizzas[name] = create_pizza_type(name)["id"]


@given(
    parsers.re(r'an order for (?P<quantity>\d+) (?P<size>\w+) "(?P<name>[^"]+)" pizzas?'),
    target_fixture="order",
)
def order_for_pizzas(make_selection, customer_details, quantity, size, name):
    return create_order(customer=customer_details, pizza_items=[make_selection(quantity, size, name)])


@given(parsers.cfparse('the order was moved to "{status}"'), target_fixture="order")
def order_moved_to(order, status):
    return update_order(order["id"], status=status)


# ---------------------------------------------------------------------------
# Then steps (shared)
# ---------------------------------------------------------------------------
@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse('the error says "{message}"'))
def error_says(error, message):
    messages = [m for field_messages in error["exc"].messages.values() for m in field_messages]
    assert message in messages, f"{message!r} not in {messages}"


@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(order, status):
    assert get_order(order["id"])["status"] == status
