"""Catalog operations exposed to the transport layer."""

from protean.utils.globals import current_domain

from pizzeria.catalog.management import AddPizzaType
from pizzeria.catalog.pizza import PizzaType


def pizza_type_payload(pizza_type: PizzaType) -> dict:
    return {
        "id": str(pizza_type.id),
        "name": pizza_type.name,
        "created_at": pizza_type.created_at,
        "updated_at": pizza_type.updated_at,
    }


def create_pizza_type(name: str) -> dict:
    """Add a pizza type to the catalog and return it.

    Raises ``ValidationError`` when a type with the same name already exists.
    """
    pizza_type_id = current_domain.process(AddPizzaType(name=name), asynchronous=False)
    return pizza_type_payload(current_domain.repository_for(PizzaType).get(pizza_type_id))
