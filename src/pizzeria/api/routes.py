"""FastAPI routes for the Pizzeria domain.

Thin adapters: request schema in, engine call, response schema out. Domain
errors are translated to HTTP status codes here and nowhere else.
"""

from contextlib import contextmanager

from fastapi import APIRouter, HTTPException
from protean.exceptions import ObjectNotFoundError, ValidationError

from pizzeria.api.schemas import (
    CreateOrderRequest,
    CreatePizzaTypeRequest,
    CustomerResponse,
    OrderResponse,
    PizzaTypeResponse,
    StatusResponse,
    UpdateOrderRequest,
)
from pizzeria.catalog.service import create_pizza_type
from pizzeria.order import queries
from pizzeria.order.service import create_order, remove_order, update_order

pizza_router = APIRouter(prefix="/pizzas", tags=["pizzas"])
customer_router = APIRouter(prefix="/customers", tags=["customers"])
order_router = APIRouter(prefix="/orders", tags=["orders"])

ORDER_NOT_FOUND = "No order found."


@contextmanager
def domain_errors(not_found: str = ORDER_NOT_FOUND):
    """Re-raise domain exceptions as HTTP errors."""
    try:
        yield
    except ValidationError as exc:
        raise HTTPException(status_code=400, detail=exc.messages) from exc
    except ObjectNotFoundError as exc:
        raise HTTPException(status_code=404, detail=not_found) from exc


# ---------------------------------------------------------------------------
# Pizza catalog
# ---------------------------------------------------------------------------
@pizza_router.get("", response_model=list[str])
async def get_pizza_types() -> list[str]:
    """Names of every pizza the shop makes, newest first."""
    return queries.list_pizza_types()


@pizza_router.post("", status_code=201, response_model=PizzaTypeResponse)
async def add_pizza_type(body: CreatePizzaTypeRequest) -> PizzaTypeResponse:
    with domain_errors():
        pizza_type = create_pizza_type(body.name)
    return PizzaTypeResponse(**pizza_type)


# ---------------------------------------------------------------------------
# Customers
# ---------------------------------------------------------------------------
@customer_router.get("", response_model=list[CustomerResponse])
async def get_customers() -> list[CustomerResponse]:
    return [CustomerResponse(**customer) for customer in queries.list_customers()]


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
@order_router.get("", response_model=list[OrderResponse])
async def get_orders(status: str | None = None, customer_id: str | None = None) -> list[OrderResponse]:
    """Orders filtered by status and/or customer, newest first."""
    with domain_errors():
        orders = queries.list_orders(status=status, customer_id=customer_id)
    return [OrderResponse(**order) for order in orders]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    with domain_errors():
        order = queries.get_order(order_id)
    return OrderResponse(**order)


@order_router.post("", status_code=201, response_model=OrderResponse)
async def place_order(body: CreateOrderRequest) -> OrderResponse:
    with domain_errors():
        order = create_order(
            customer=body.customer.model_dump(),
            pizza_items=[item.model_dump() for item in body.pizza_items],
            delivery=body.delivery,
        )
    return OrderResponse(**order)


@order_router.patch("/{order_id}", response_model=OrderResponse)
async def modify_order(order_id: str, body: UpdateOrderRequest) -> OrderResponse:
    pizza_items = None
    if body.pizza_items is not None:
        pizza_items = [item.model_dump() for item in body.pizza_items]

    with domain_errors():
        order = update_order(order_id, status=body.status, pizza_items=pizza_items)
    return OrderResponse(**order)


@order_router.delete("/{order_id}", response_model=StatusResponse)
async def delete_order(order_id: str) -> StatusResponse:
    with domain_errors():
        remove_order(order_id)
    return StatusResponse()
