from fastapi import FastAPI
from contextlib import asynccontextmanager

from backend.app.config import AppConfig
from backend.app.api.routes_graph import router as graph_router
from backend.app.dependencies import get_graph


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifecycle hooks.

    The food web is created once at startup and lives for the whole
    process; nothing is persisted at shutdown.
    """
    get_graph()

    yield


def create_app(config: AppConfig) -> FastAPI:
    app = FastAPI(
        title=config.app_name,
        lifespan=lifespan,
    )

    app.include_router(
        graph_router,
        prefix=f"{config.api_prefix}/graph",
        tags=["graph"],
    )

    return app


config = AppConfig()
app = create_app(config)
