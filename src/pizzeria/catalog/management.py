"""Catalog management — command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from pizzeria.catalog.pizza import PizzaType
from pizzeria.domain import pizzeria
from pizzeria.utils.logging import get_logger

logger = get_logger(__name__)


@pizzeria.command(part_of="PizzaType")
class AddPizzaType:
    name = String(required=True, max_length=100)


@pizzeria.command_handler(part_of=PizzaType)
class ManageCatalogHandler:
    @handle(AddPizzaType)
    def add_pizza_type(self, command):
        repo = current_domain.repository_for(PizzaType)

        if repo.find_by_name(command.name) is not None:
            raise ValidationError({"name": ["Identical pizza already exists."]})

        pizza_type = PizzaType.add(name=command.name)
        repo.add(pizza_type)

        logger.info("pizza_type_added", pizza_type_id=str(pizza_type.id), name=pizza_type.name)
        return str(pizza_type.id)
