import logging

from fastapi import FastAPI
from contextlib import asynccontextmanager

from backend.app.config import AppConfig
from backend.app.api.errors import install_error_handlers
from backend.app.api.routes_nodes import router as nodes_router
from backend.app.api.routes_links import router as links_router
from backend.app.api.routes_graph import router as graph_router
from backend.app.dependencies import get_registry


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifecycle hooks.

    Builds (and seeds) the registry once at startup so the first
    request does not pay for it.
    """
    get_registry()

    yield


def create_app(config: AppConfig) -> FastAPI:
    logging.getLogger("contentgraph").setLevel(config.log_level)

    app = FastAPI(
        title=config.app_name,
        lifespan=lifespan,
    )
    install_error_handlers(app)

    app.include_router(
        nodes_router,
        prefix=f"{config.api_prefix}/nodes",
        tags=["nodes"],
    )

    app.include_router(
        links_router,
        prefix=f"{config.api_prefix}/links",
        tags=["links"],
    )

    app.include_router(
        graph_router,
        prefix=config.api_prefix,
        tags=["graph"],
    )

    return app


config = AppConfig()
app = create_app(config)
