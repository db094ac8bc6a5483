import os

import pytest


@pytest.fixture(scope="session")
def _pizzeria_domain(request):
    """Initialize the pizzeria domain once per session."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from pizzeria.domain import pizzeria

    pizzeria.init()
    return pizzeria


@pytest.fixture(scope="session", autouse=True)
def setup_db(_pizzeria_domain):
    from pizzeria.utils.db import drop_db, setup_db

    setup_db(_pizzeria_domain)

    yield

    drop_db(_pizzeria_domain)


@pytest.fixture(autouse=True)
def run_around_tests(_pizzeria_domain):
    """Push domain context before each test, cleanup after."""
    ctx = _pizzeria_domain.domain_context()
    ctx.push()

    yield

    from protean import current_domain

    for _, provider in current_domain.providers.items():
        provider._data_reset()

    current_domain.event_store.store._data_reset()
    ctx.pop()


# ---------------------------------------------------------------------------
# Shared builders
# ---------------------------------------------------------------------------
@pytest.fixture()
def add_pizza_type():
    """Add a pizza type through the catalog command and return its id."""
    from pizzeria.catalog.management import AddPizzaType
    from protean.utils.globals import current_domain

    def _add(name="Margherita"):
        return current_domain.process(AddPizzaType(name=name), asynchronous=False)

    return _add


@pytest.fixture()
def margherita(add_pizza_type):
    return add_pizza_type("Margherita")


@pytest.fixture()
def customer_details():
    return {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "street_address": "12 Analytical Row",
        "city": "Toronto",
        "province": "ON",
        "postal_code": "M5V 2T6",
        "email": "ada@example.com",
        "phone": "+1 416-555-0199",
    }
