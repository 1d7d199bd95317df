"""Main FastAPI application for the API Key Directory service."""

import logging
from pathlib import Path
from contextlib import asynccontextmanager
from typing import Dict, Any

import yaml
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, get_settings
from .db.connection import db_manager, get_db_pool
from .errors import register_exception_handlers
from .errors.http_errors import ServiceUnavailableError
from .middleware import RequestTimingMiddleware
from .routes import api_keys_router


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=settings.log_format
    )


configure_logging(get_settings())
logger = logging.getLogger(__name__)

SERVICE_NAME = "API Key Directory"
SERVICE_VERSION = "1.0.0"


def load_openapi_spec() -> Dict[str, Any]:
    """Load the custom OpenAPI specification from YAML file."""
    openapi_file = Path(__file__).parent.parent / "openapi" / "api-keys.yaml"

    try:
        with open(openapi_file, 'r') as f:
            return yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning(f"OpenAPI spec file not found at {openapi_file}, using auto-generated spec")
        return {}
    except yaml.YAMLError as e:
        logger.warning(f"Failed to parse OpenAPI spec: {e}, using auto-generated spec")
        return {}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info(f"Starting {SERVICE_NAME}")
    settings = get_settings()

    # Configure logging level from settings
    logging.getLogger().setLevel(getattr(logging, settings.log_level))

    try:
        await db_manager.initialize()
        logger.info("Database connection pool initialized")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise

    yield

    # Shutdown
    logger.info(f"Shutting down {SERVICE_NAME}")
    try:
        await db_manager.close()
        logger.info("Database connections closed")
    except Exception as e:
        logger.error(f"Error during shutdown: {e}")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    custom_openapi = load_openapi_spec()
    info = custom_openapi.get("info", {})

    app = FastAPI(
        title=info.get("title", SERVICE_NAME),
        description=info.get("description", "Cursor-paginated listing of API keys"),
        version=info.get("version", SERVICE_VERSION),
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        debug=settings.debug,
        lifespan=lifespan
    )

    if custom_openapi:
        # Serve the YAML document with the server URL taken from settings
        def get_custom_openapi():
            spec = dict(custom_openapi)
            if spec.get('servers'):
                spec['servers'] = [{**spec['servers'][0], 'url': settings.api_url}]
            return spec

        app.openapi = get_custom_openapi

    app.add_middleware(RequestTimingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    app.include_router(api_keys_router)

    @app.get("/health", tags=["Health"])
    async def health_check() -> Dict[str, Any]:
        """Health check endpoint with database connectivity test."""
        try:
            pool = await get_db_pool()
            async with pool.acquire() as conn:
                await conn.execute("SELECT 1")
        except Exception as e:
            logger.error(f"Health check failed: {e}")
            raise ServiceUnavailableError("Database connection failed")

        return {
            "status": "healthy",
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION,
            "database": "connected"
        }

    @app.get("/live", tags=["Health"])
    async def liveness_check() -> Dict[str, str]:
        """Liveness check endpoint."""
        return {
            "status": "alive",
            "service": SERVICE_NAME
        }

    @app.get("/", tags=["Root"])
    async def root() -> Dict[str, str]:
        """Root endpoint with API information."""
        return {
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION,
            "docs": "/docs",
            "health": "/health"
        }

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()

    uvicorn.run(
        "apikeys.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower()
    )
