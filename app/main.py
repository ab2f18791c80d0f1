# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Inventory Admin API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import (
    InventoryAdminException,
    inventory_admin_exception_handler,
    validation_exception_handler,
)
from app.routers import health, categories, products, customers, orders
from app.auth import routes as auth_routes

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Clients are created per request, so there is nothing to open or close
    here beyond logging.
    """
    logger.info(f"Starting Inventory Admin API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    yield

    logger.info("Shutting down Inventory Admin API")


# Create FastAPI application
app = FastAPI(
    title="Inventory Admin API",
    description="""
## Inventory & Order Management Admin

Back office for a small shop: products, categories, customers and orders,
stored in Supabase Postgres and protected by row-level security.

### Conventions

- Every endpoint except health checks needs a Supabase access token
  (`Authorization: Bearer <token>`).
- Mutations answer `{success, error}`; database messages are passed through
  as-is (e.g. a duplicate SKU).
- List pages answer `{data, error, total}` and accept `?q=` for a
  case-insensitive substring search.
- Each entity has a `/dialog` endpoint: GET opens the add/edit dialog,
  POST submits its form.

### Quick Start

```bash
# List products matching "mouse"
curl http://localhost:8000/api/v1/products?q=mouse \\
  -H "Authorization: Bearer $TOKEN"

# Create a category
curl -X POST http://localhost:8000/api/v1/categories \\
  -H "Authorization: Bearer $TOKEN" \\
  -H "Content-Type: application/json" \\
  -d '{"name": "Garden", "description": "Outdoor tools"}'
```
""",
    version=health.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Auth",
            "description": "Check the Supabase access token the client holds",
        },
        {
            "name": "Categories",
            "description": "Product categories",
        },
        {
            "name": "Products",
            "description": "Inventory items with stock levels",
        },
        {
            "name": "Customers",
            "description": "People who place orders",
        },
        {
            "name": "Orders",
            "description": "Orders and their line items",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

# CORS middleware - allows cross-origin requests
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(InventoryAdminException)
async def handle_inventory_admin_exception(request: Request, exc: InventoryAdminException):
    """Handle custom Inventory Admin exceptions."""
    return await inventory_admin_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle malformed JSON bodies and query parameters."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Authentication endpoints
app.include_router(
    auth_routes.router,
    prefix="/api/v1/auth",
    tags=["Auth"]
)

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

# Category endpoints
app.include_router(
    categories.router,
    prefix="/api/v1/categories",
    tags=["Categories"]
)

# Product endpoints
app.include_router(
    products.router,
    prefix="/api/v1/products",
    tags=["Products"]
)

# Customer endpoints
app.include_router(
    customers.router,
    prefix="/api/v1/customers",
    tags=["Customers"]
)

# Order and order item endpoints
app.include_router(
    orders.router,
    prefix="/api/v1/orders",
    tags=["Orders"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Inventory Admin API",
        "version": health.VERSION,
        "docs": "/docs",
        "health": "/api/v1/health",
    }
