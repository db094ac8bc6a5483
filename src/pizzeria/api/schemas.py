"""Pydantic request/response schemas for the Pizzeria API.

These are the external contracts; commands and aggregates stay internal.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class CustomerSchema(BaseModel):
    first_name: str = Field(..., max_length=100)
    last_name: str = Field(..., max_length=100)
    street_address: str | None = Field(None, max_length=255)
    city: str | None = Field(None, max_length=100)
    province: str | None = Field(None, max_length=100)
    postal_code: str | None = Field(None, max_length=20)
    email: str = Field(..., max_length=254)
    phone: str = Field(..., max_length=20)


class PizzaItemSchema(BaseModel):
    # Selections without a positive quantity are accepted and dropped
    quantity: int | None = None
    size: str
    pizza_type_id: str


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class CreatePizzaTypeRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)


class CreateOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "delivery": True,
                    "customer": {
                        "first_name": "Ada",
                        "last_name": "Lovelace",
                        "street_address": "12 Analytical Row",
                        "city": "Toronto",
                        "province": "ON",
                        "postal_code": "M5V 2T6",
                        "email": "ada@example.com",
                        "phone": "+1 416-555-0199",
                    },
                    "pizza_items": [
                        {"quantity": 2, "size": "MEDIUM", "pizza_type_id": "<pizza type id>"},
                    ],
                }
            ]
        }
    }

    delivery: bool = False
    customer: CustomerSchema
    pizza_items: list[PizzaItemSchema]


class UpdateOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {"status": "PREPARING"},
                {"pizza_items": [{"quantity": 1, "size": "LARGE", "pizza_type_id": "<pizza type id>"}]},
            ]
        }
    }

    status: str | None = None
    pizza_items: list[PizzaItemSchema] | None = None


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class PizzaTypeResponse(BaseModel):
    id: str
    name: str
    created_at: datetime
    updated_at: datetime


class CustomerResponse(BaseModel):
    id: str
    first_name: str
    last_name: str
    street_address: str | None = None
    city: str | None = None
    province: str | None = None
    postal_code: str | None = None
    email: str
    phone: str
    order_id: str
    created_at: datetime


class LineItemResponse(BaseModel):
    id: str
    quantity: int
    size: str
    pizza_type_id: str
    order_id: str


class OrderResponse(BaseModel):
    id: str
    status: str
    delivery: bool
    created_at: datetime
    updated_at: datetime
    customer: CustomerResponse | None = None
    pizza_items: list[LineItemResponse] | None = None


class StatusResponse(BaseModel):
    status: str = "ok"
