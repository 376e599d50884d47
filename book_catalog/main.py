"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() returns a configured app
   - Settings and the Database gateway can be injected (tests pass an
     in-memory SQLite database)

2. Lifespan Events
   - startup: open and verify the database connection
   - shutdown: release the connection

3. Worker Threads
   - Route handlers are plain `def` functions; FastAPI runs them in its
     thread pool, so a request waiting on the database never blocks
     the event loop or other requests
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from book_catalog.config import Settings, get_settings
from book_catalog.database import Database
from book_catalog.errors import register_exception_handlers
from book_catalog.routers import books_router, publishers_router

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield runs on startup, code after yield on shutdown.

    A failed startup connection is logged and the server keeps running;
    requests that need the database fail individually until it is back.
    """
    app_settings: Settings = app.state.settings
    database: Database = app.state.database

    # ----- STARTUP -----
    logger.info(f"Starting {app_settings.app_name}...")
    logger.info(f"Debug mode: {app_settings.debug}")

    if database.connect():
        if app_settings.db_create_tables:
            database.create_tables()
            logger.info("Database tables created")
    else:
        logger.warning("Database unavailable - storage routes will fail until it is reachable")

    yield  # Application runs here

    # ----- SHUTDOWN -----
    logger.info(f"Shutting down {app_settings.app_name}...")
    database.dispose()


# =============================================================================
# Application Factory
# =============================================================================
def create_app(
    app_settings: Settings | None = None,
    database: Database | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use (defaults to the cached settings)
        database: Storage gateway to use (defaults to one built from settings)

    Returns:
        Configured FastAPI application instance
    """
    app_settings = app_settings or get_settings()
    database = database or Database.from_settings(app_settings)

    app = FastAPI(
        title=app_settings.app_name,
        description="""
## Book Catalog API

Manage books and the publishers that publish them.

- **Books**: list, read, create, update and delete
- **Publishers**: list, create and delete (blocked while books reference them)

Every error response has the shape `{"error": "<message>"}`.
        """,
        version=app_settings.api_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # The gateway is owned by the app and reaches handlers via Depends
    app.state.settings = app_settings
    app.state.database = database

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.allowed_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------
    register_exception_handlers(app, app_settings)

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    app.include_router(books_router)
    app.include_router(publishers_router)

    # -------------------------------------------------------------------------
    # Health Check Endpoint
    # -------------------------------------------------------------------------
    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
        description="Check if the API is running and the database answers.",
    )
    def health_check(request: Request) -> dict:
        """
        Health check endpoint.

        Always answers 200: the process stays up while the database is
        down, so the database state is reported in the body.
        """
        database_ok = request.app.state.database.ping()

        return {
            "status": "healthy" if database_ok else "degraded",
            "app": app_settings.app_name,
            "version": app_settings.api_version,
            "database": "connected" if database_ok else "unavailable",
        }

    @app.get(
        "/",
        tags=["Root"],
        summary="API root",
        description="Welcome message and API information.",
    )
    async def root() -> dict:
        """Root endpoint with API information."""
        return {
            "message": f"Welcome to {app_settings.app_name}",
            "version": app_settings.api_version,
            "docs": "/docs",
            "health": "/health",
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn book_catalog.main:app

app = create_app()


# =============================================================================
# Development Server
# =============================================================================
# python -m book_catalog.main

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "book_catalog.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
