"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ggdevlog.api.activity import router as activity_router
from ggdevlog.api.auth import router as auth_router
from ggdevlog.api.boards import router as board_router
from ggdevlog.api.errors import register_error_handlers
from ggdevlog.api.images import router as image_router
from ggdevlog.api.introduce import router as introduce_router
from ggdevlog.api.posts import router as post_router
from ggdevlog.app_logging import configure_logging
from ggdevlog.config import parse_cors_origins
from ggdevlog.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="GGDevLog API", lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(container.settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)

    app.include_router(auth_router)
    app.include_router(activity_router)
    app.include_router(introduce_router)
    app.include_router(board_router)
    app.include_router(post_router)
    app.include_router(image_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
