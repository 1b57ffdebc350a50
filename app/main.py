# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Medicine Catalog Admin API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   poetry run uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import (
    CatalogException,
    catalog_exception_handler,
    validation_exception_handler,
)
from app.routers import health, brands, categories, medicines, contacts, dashboard
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

    The Supabase client is created lazily on first use, so startup only
    reports the configuration.
    """
    logger.info(f"Starting Medicine Catalog API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")
    logger.info(f"Storage bucket: {settings.STORAGE_BUCKET}")

    yield

    logger.info("Shutting down Medicine Catalog API")


app = FastAPI(
    title="Medicine Catalog Admin API",
    description="""
## Admin API for the medicine information catalog

Every catalog endpoint requires a Supabase access token belonging to a
user with the **admin** role. Non-admin sessions are revoked on contact.

### Response envelope

All catalog endpoints answer with the same shape:

```json
{"error": null, "data": {...}}
{"error": {"message": "Brand with ID ... not found", "code": "NOT_FOUND", "status": 404}, "data": null}
```

### Images

Brand logos and medicine images are uploaded to Supabase Storage with the
create/update forms. Deleting a brand or medicine removes its images too.
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "Auth", "description": "Admin sign-in and identity"},
        {"name": "Brands", "description": "Brands and their logos"},
        {"name": "Categories", "description": "Medicine categories"},
        {"name": "Medicines", "description": "Medicines and their image gallery"},
        {"name": "Contacts", "description": "Contact form inquiries"},
        {"name": "Dashboard", "description": "Summary statistics"},
        {"name": "Health", "description": "API health and readiness checks"},
    ],
)


# =============================================================================
# Middleware
# =============================================================================

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

@app.exception_handler(CatalogException)
async def handle_catalog_exception(request: Request, exc: CatalogException):
    """Handle custom catalog exceptions (raised outside workflows, e.g. auth)."""
    return await catalog_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_request_validation(request: Request, exc: RequestValidationError):
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

app.include_router(auth_routes.router, prefix="/api/v1/auth", tags=["Auth"])
app.include_router(health.router, prefix="/api/v1", tags=["Health"])
app.include_router(brands.router, prefix="/api/v1/brands", tags=["Brands"])
app.include_router(categories.router, prefix="/api/v1/categories", tags=["Categories"])
app.include_router(medicines.router, prefix="/api/v1/medicines", tags=["Medicines"])
app.include_router(contacts.router, prefix="/api/v1/contacts", tags=["Contacts"])
app.include_router(dashboard.router, prefix="/api/v1/dashboard", tags=["Dashboard"])


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint - returns API info."""
    return {
        "name": "Medicine Catalog Admin API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/v1/health",
    }
