"""Domain events for the PizzaType aggregate."""

from protean.fields import DateTime, Identifier, String

from pizzeria.domain import pizzeria


@pizzeria.event(part_of="PizzaType")
class PizzaTypeAdded:
    """A new kind of pizza was added to the catalog."""

    __version__ = "v1"

    pizza_type_id = Identifier(required=True)
    name = String(required=True)
    added_at = DateTime(required=True)
