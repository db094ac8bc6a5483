"""PizzaType aggregate — one entry of the shop's pizza catalog."""

from datetime import datetime

from protean.fields import DateTime, String

from pizzeria.domain import pizzeria


@pizzeria.aggregate
class PizzaType:
    """A kind of pizza the shop makes.

    Line items reference pizza types by identity, so a type is never removed
    once added. Names are unique across the catalog.
    """

    name = String(required=True, max_length=100, unique=True)
    created_at = DateTime(default=datetime.now)
    updated_at = DateTime(default=datetime.now)

    @classmethod
    def add(cls, name):
        from pizzeria.catalog.events import PizzaTypeAdded

        now = datetime.now()
        pizza_type = cls(name=name, created_at=now, updated_at=now)
        pizza_type.raise_(
            PizzaTypeAdded(
                pizza_type_id=pizza_type.id,
                name=name,
                added_at=now,
            )
        )
        return pizza_type
