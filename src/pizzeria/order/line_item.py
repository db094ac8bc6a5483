"""LineItem aggregate and the normalization of incoming pizza selections."""

from datetime import datetime
from enum import Enum

from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import DateTime, Identifier, Integer, String
from protean.utils.globals import current_domain

from pizzeria.domain import pizzeria


class PizzaSize(Enum):
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"


INVALID_SELECTION = "One or more pizza selections were invalid."
NO_SELECTIONS = "No pizza selections were made."


@pizzeria.aggregate
class LineItem:
    """One pizza selection belonging to an order.

    Line items are never edited in place: an order's set is replaced as a
    whole, so an item lives from its order's placement (or the last
    replacement) until the next replacement or the order's removal.
    """

    quantity = Integer(required=True, min_value=1)
    size = String(required=True, max_length=10, choices=PizzaSize)
    pizza_type_id = Identifier(required=True)
    order_id = Identifier(required=True)
    created_at = DateTime(default=datetime.now)

    @classmethod
    def for_order(cls, order_id, selection):
        return cls(
            quantity=selection["quantity"],
            size=selection.get("size"),
            pizza_type_id=selection["pizza_type_id"],
            order_id=order_id,
            created_at=datetime.now(),
        )


def _has_positive_quantity(selection) -> bool:
    quantity = selection.get("quantity")
    if quantity is None:
        return False

    try:
        return int(quantity) > 0
    except (TypeError, ValueError):
        raise ValidationError({"quantity": [f"Quantity must be a whole number, got {quantity!r}"]}) from None


def _ensure_pizza_type_exists(pizza_type_id):
    from pizzeria.catalog.pizza import PizzaType

    if not pizza_type_id:
        raise ValidationError({"pizza_items": [INVALID_SELECTION]})

    try:
        current_domain.repository_for(PizzaType).get(pizza_type_id)
    except ObjectNotFoundError:
        raise ValidationError({"pizza_items": [INVALID_SELECTION]}) from None


def select_line_items(selections) -> list[dict]:
    """Validate ``selections`` against the catalog and keep the orderable ones.

    Every selection must name a known pizza type, even one that is about to be
    dropped for its quantity; the first unknown type fails the whole batch.
    Selections without a positive quantity are then discarded. Raises
    ``ValidationError`` when nothing orderable remains.
    """
    if selections is None:
        selections = []
    if not isinstance(selections, list | tuple) or not all(isinstance(s, dict) for s in selections):
        raise ValidationError({"pizza_items": ["Pizza selections must be a list of objects."]})

    for selection in selections:
        _ensure_pizza_type_exists(selection.get("pizza_type_id"))

    selected = [selection for selection in selections if _has_positive_quantity(selection)]
    if not selected:
        raise ValidationError({"pizza_items": [NO_SELECTIONS]})

    return selected


def build_line_items(order_id, selections) -> list[LineItem]:
    """Construct (unsaved) line items for ``order_id`` from validated selections."""
    return [LineItem.for_order(order_id, selection) for selection in selections]
