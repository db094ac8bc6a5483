"""Pizzeria FastAPI application.

Serves the pizza catalog, customers and orders over HTTP. Every request runs
inside the pizzeria domain context so handlers can reach ``current_domain``.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from uuid import uuid4

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pizzeria.domain import pizzeria
from pizzeria.utils.logging import bind_request_context, clear_request_context, get_logger

# Initialized at module level so uvicorn workers share one domain.
# PROTEAN_ENV selects the domain.toml overlay ("production" → PostgreSQL).
pizzeria.init()

logger = get_logger(__name__)

from pizzeria.api import customer_router, order_router, pizza_router  # noqa: E402

app = FastAPI(
    title="Pizzeria API",
    description="Pizza catalog, customers and the order lifecycle",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the pizzeria domain context and tag log lines with a request id."""
    clear_request_context()
    bind_request_context(request_id=request.headers.get("x-request-id", uuid4().hex), path=request.url.path)
    with pizzeria.domain_context():
        response = await call_next(request)
    logger.debug("request_completed", method=request.method, status_code=response.status_code)
    return response


app.include_router(pizza_router)
app.include_router(customer_router)
app.include_router(order_router)


@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": pizzeria.name})
