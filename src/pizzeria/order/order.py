"""Order aggregate: the consistency root of the pizzeria domain.

An Order owns exactly one Customer and one or more LineItems. Both are stored
as separate aggregates that point back at the order through ``order_id``;
the handlers in this package keep the three in step inside one unit of work.

State Machine:
    NEW, PREPARING, DELIVERING may move to any other status, in any order.
    DELIVERED is terminal: once reached, neither the status nor the line
    items of the order may change.
"""

from datetime import datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, String

from pizzeria.domain import pizzeria


class OrderStatus(Enum):
    NEW = "NEW"
    PREPARING = "PREPARING"
    DELIVERING = "DELIVERING"
    DELIVERED = "DELIVERED"


_TERMINAL_STATES = {OrderStatus.DELIVERED}


def parse_status(value) -> OrderStatus:
    """Resolve a status name, raising ``ValidationError`` for unknown names."""
    try:
        return OrderStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in OrderStatus)
        raise ValidationError({"status": [f"Unknown order status '{value}'. Expected one of: {allowed}"]}) from None


@pizzeria.aggregate
class Order:
    status = String(
        max_length=20,
        choices=OrderStatus,
        default=OrderStatus.NEW.value,
    )
    delivery = Boolean(default=False)
    created_at = DateTime(default=datetime.now)
    updated_at = DateTime(default=datetime.now)

    @classmethod
    def place(cls, delivery=False):
        """Build a NEW order. Customer and line items are attached by the caller."""
        now = datetime.now()
        return cls(
            status=OrderStatus.NEW.value,
            delivery=bool(delivery),
            created_at=now,
            updated_at=now,
        )

    @property
    def is_delivered(self) -> bool:
        return OrderStatus(self.status) in _TERMINAL_STATES

    def ensure_modifiable(self):
        if self.is_delivered:
            raise ValidationError({"status": ["Order has already been delivered and cannot be updated."]})

    def record_placement(self, customer_id, item_count):
        from pizzeria.order.events import OrderPlaced

        self.raise_(
            OrderPlaced(
                order_id=self.id,
                customer_id=customer_id,
                delivery=self.delivery,
                item_count=item_count,
                placed_at=self.created_at,
            )
        )

    def replace_items(self, item_count):
        """Mark the line item set as replaced by ``item_count`` new items."""
        from pizzeria.order.events import OrderItemsReplaced

        self.ensure_modifiable()

        now = datetime.now()
        self.updated_at = now
        self.raise_(
            OrderItemsReplaced(
                order_id=self.id,
                item_count=item_count,
                replaced_at=now,
            )
        )

    def change_status(self, new_status) -> bool:
        """Move the order to ``new_status``.

        Returns False, without touching the order, when it already has that
        status. Stages may be skipped; only leaving DELIVERED is refused.
        """
        from pizzeria.order.events import OrderStatusChanged

        self.ensure_modifiable()

        target = parse_status(new_status)
        if target.value == self.status:
            return False

        previous_status = self.status
        now = datetime.now()
        self.status = target.value
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=self.id,
                previous_status=previous_status,
                new_status=target.value,
                changed_at=now,
            )
        )
        return True
