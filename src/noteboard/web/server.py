from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from noteboard.app import App
from noteboard.config import Config
from noteboard.errors import UserError
from noteboard.web.deps import ACTOR_HEADER
from noteboard.web.error_handlers import general_exception_handler, user_error_handler
from noteboard.web.openapi import set_custom_openapi
from noteboard.web.routers import comments_router, notes_router


def create_fastapi_app(app_instance: App, config: Config) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        """FastAPI application lifespan management."""
        # Store app instance and config in app state
        app.state.app = app_instance
        app.state.config = config
        with app_instance.lifespan():
            yield

    app = FastAPI(
        title="Noteboard API",
        lifespan=lifespan,
        openapi_tags=[],  # Tags will be added by custom OpenAPI function
    )

    if config.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def bind_request_context(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        """Attach method, path and the raw actor header to every log line of the request."""
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            method=request.method,
            path=request.url.path,
            actor_id=request.headers.get(ACTOR_HEADER),
        )
        return await call_next(request)

    # Health check endpoint (at root level, not versioned)
    @app.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy"}

    # API v1 routes
    app.include_router(notes_router, prefix="/api/v1")
    app.include_router(comments_router, prefix="/api/v1")

    # Register error handlers
    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    set_custom_openapi(app)

    return app
