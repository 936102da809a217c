"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from macro_tracker.api.analysis import router as analysis_router
from macro_tracker.api.consumables import router as consumables_router
from macro_tracker.api.errors import register_exception_handlers
from macro_tracker.api.food_entries import router as food_entries_router
from macro_tracker.api.goals import router as goals_router
from macro_tracker.api.users import router as users_router
from macro_tracker.app_logging import configure_logging
from macro_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Macro Tracker", lifespan=lifespan)
    app.state.container = container

    register_exception_handlers(app)
    app.include_router(users_router)
    app.include_router(consumables_router)
    app.include_router(food_entries_router)
    app.include_router(goals_router)
    app.include_router(analysis_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
