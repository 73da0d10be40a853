"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from cosmic_gateway import __version__
from cosmic_gateway.config import get_settings
from cosmic_gateway.web import responses
from cosmic_gateway.web.validators import ValidationFailed

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    settings = get_settings()
    settings.validate_required()
    logger.info(
        f"Gateway ready (env={settings.node_env}, network={settings.default_network})"
    )
    yield
    # Shutdown
    logger.info("Gateway stopped")


def register_exception_handlers(app: FastAPI) -> None:
    """Render every failure in the response envelope."""

    @app.exception_handler(ValidationFailed)
    async def handle_validation_failed(request: Request, exc: ValidationFailed):
        logger.info(f"Rejected {request.method} {request.url.path}: {exc.message}")
        return responses.validation_error(exc.message, exc.details)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        logger.info(f"Malformed request to {request.method} {request.url.path}")
        return responses.validation_error("Invalid request body", exc.errors())

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return responses.not_found(f"Route {request.method} {request.url.path} not found")
        return responses.error(str(exc.detail), exc.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return responses.error("Internal server error", 500)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Cosmic Gateway API",
        description="HTTP gateway to Cavos wallets and the Cosmic Trader contract",
        version=__version__,
        lifespan=lifespan,
        debug=settings.debug,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.debug else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Register routes
    from cosmic_gateway.api.routes import health
    from cosmic_gateway.web.controllers import (
        auth_router,
        cosmic_trader_router,
        wallet_router,
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(auth_router)
    app.include_router(wallet_router)
    app.include_router(cosmic_trader_router)

    return app


# Default app instance
app = create_app()
