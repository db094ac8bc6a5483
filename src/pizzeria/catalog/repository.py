"""Repository for the PizzaType aggregate."""

from pizzeria.catalog.pizza import PizzaType
from pizzeria.domain import pizzeria


@pizzeria.repository(part_of=PizzaType)
class PizzaTypeRepository:
    def find_by_name(self, name: str) -> PizzaType | None:
        return self._dao.query.filter(name=name).all().first

    def newest_first(self) -> list[PizzaType]:
        return self._dao.query.order_by("-created_at").all().items
