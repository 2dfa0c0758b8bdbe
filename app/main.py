# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# Builds the Weather API application: middleware, exception handlers,
# controllers and the root endpoint.
#
# Usage:
#   python -m app.server --port 8080
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from app import __version__
from app.config import Settings, get_settings, settings
from app.routers import register_controllers

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

ROOT_MESSAGE = "Hello from Weather API!"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Logs startup and shutdown; there are no resources to open or close.
    """
    logger.info(
        f"Starting Weather API in {app.state.settings.ENVIRONMENT} mode "
        f"with {len(app.routes)} route(s)"
    )

    yield

    logger.info("Shutting down Weather API")


# =============================================================================
# Exception Handlers
# =============================================================================

async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Root Endpoint
# =============================================================================

async def root():
    """
    Root endpoint - returns a plain-text greeting.
    """
    return ROOT_MESSAGE


# =============================================================================
# Application Factory
# =============================================================================

def create_app(app_settings: Settings | None = None) -> FastAPI:
    """
    Build a configured FastAPI application.

    Args:
        app_settings: Settings to use (defaults to the cached global settings)

    Returns:
        FastAPI: Application with controllers and the root route registered
    """
    app_settings = app_settings or get_settings()
    docs_enabled = not app_settings.is_production

    app = FastAPI(
        title="Weather API",
        description="Minimal HTTP service with a controller registry and a root greeting.",
        version=__version__,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Root",
                "description": "Service greeting",
            },
            {
                "name": "Health",
                "description": "API health and liveness checks",
            },
        ],
    )
    app.state.settings = app_settings

    # CORS middleware - allows cross-origin requests
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins_list if app_settings.is_production else ["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(Exception, handle_general_exception)

    register_controllers(app)

    app.add_api_route(
        "/",
        root,
        methods=["GET"],
        response_class=PlainTextResponse,
        tags=["Root"],
    )

    return app


# Module-level app for `uvicorn app.main:app`
app = create_app()
