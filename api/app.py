"""
Module 09D - FastAPI Application

Main application setup and configuration.

Usage:
    uvicorn api.app:app --reload

    # Or run directly
    python -m api.app
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from api.errors import (
    APIError,
    api_error_handler,
    generic_error_handler,
    store_error_handler,
    validation_error_handler,
)
from api.routes import health, history, request
from core.config.runtime import RuntimeConfig, load_runtime_config
from core.schemas.errors import StoreError
from orchestrator.relay import RelayService


logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging in the shared format."""
    logging.basicConfig(
        level=getattr(logging, (level or "INFO").upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    config: RuntimeConfig = app.state.config
    logger.info(f"relaypost API starting (store={config.store.url}, timeout={config.engine.timeout_ms}ms)")
    yield
    service: Optional[RelayService] = getattr(app.state, "service", None)
    if service is not None and getattr(app.state, "owns_service", False):
        service.store.close()
    logger.info("relaypost API stopped")


def create_app(
    config: Optional[RuntimeConfig] = None,
    service: Optional[RelayService] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Runtime configuration (loaded from file/env when omitted)
        service: Prebuilt RelayService; when omitted one is built from the
            config on first request
    """
    if config is None:
        config = load_runtime_config()

    app = FastAPI(
        title="Relaypost API",
        description="""
HTTP request proxy-and-recorder backing an API-testing client.

## Endpoints

- **POST /api/request** - Execute an outbound request and record it
- **GET /api/history** - Most recent 50 exchanges, newest first
- **GET /api/history/{id}** - One recorded exchange
- **DELETE /api/history/{id}** - Delete one exchange
- **DELETE /api/history** - Delete all exchanges
- **GET /api/health** - Health check

## Body types

- `raw` - JSON-parsed when possible, otherwise sent as text
- `form-data` - Sent as-is with multipart/form-data
- `urlencoded` - Sent as-is with application/x-www-form-urlencoded
        """,
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.service = service
    app.state.owns_service = service is None

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register exception handlers
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)

    # Include routers
    app.include_router(health.router)
    app.include_router(request.router)
    app.include_router(history.router)

    return app


_config = load_runtime_config()
configure_logging(_config.log_level)

# Create the application instance
app = create_app(_config)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=_config.server.host, port=_config.server.port)
