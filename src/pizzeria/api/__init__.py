"""Pizzeria domain API package."""

from pizzeria.api.routes import customer_router, order_router, pizza_router

__all__ = ["pizza_router", "customer_router", "order_router"]
