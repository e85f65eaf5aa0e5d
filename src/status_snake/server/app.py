"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from status_snake.config import GameConfig
from status_snake.server.routes import router
from status_snake.server.session import SessionManager
from status_snake.server.websocket import ws_router


@asynccontextmanager
async def _lifespan(app: FastAPI):
    app.state.session_manager = SessionManager(app.state.config)
    yield
    app.state.session_manager.cleanup()


def create_app(config: GameConfig | None = None) -> FastAPI:
    """Build and return the FastAPI application."""
    app = FastAPI(
        title="Status Snake API", version="0.1.0", lifespan=_lifespan,
    )
    app.state.config = config or GameConfig()
    app.include_router(router)
    app.include_router(ws_router)
    return app
