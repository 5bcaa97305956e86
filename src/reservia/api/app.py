"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from reservia.api.auth import router as auth_router
from reservia.api.errors import handle_reservia_error, handle_validation_error
from reservia.api.foods import router as foods_router
from reservia.api.orders import router as orders_router
from reservia.api.users import router as users_router
from reservia.app_logging import configure_logging
from reservia.config import parse_cors_origins
from reservia.containers import AppContainer
from reservia.domain.errors import ReserviaError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        try:
            await app.state.container.close_resources()
        except Exception:
            logger.exception("Failed to close store connection")

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    origins = parse_cors_origins(container.settings.cors_origins)
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(ReserviaError, handle_reservia_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)

    app.include_router(auth_router)
    app.include_router(foods_router)
    app.include_router(orders_router)
    app.include_router(users_router)

    @app.get("/", response_class=PlainTextResponse)
    async def root() -> str:
        return "reservia server is running..."

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
