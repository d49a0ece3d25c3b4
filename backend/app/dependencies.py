from functools import lru_cache
import logging
from pathlib import Path
import time

from fastapi import Header, HTTPException, Request

from contentgraph.events.event_bus import EventBus
from contentgraph.graph.graph_store import GraphStore

from backend.app.config import AppConfig
from backend.app.loaders.graph_loader import load_registry_from_seed


@lru_cache
def get_config() -> AppConfig:
    return AppConfig()


@lru_cache
def get_event_bus() -> EventBus:
    return EventBus()


@lru_cache
def get_registry() -> GraphStore:
    logger = logging.getLogger("contentgraph.startup")
    t0 = time.perf_counter()
    config = get_config()
    store = GraphStore(config.registry_config(), events=get_event_bus())

    store.metadata["seeded"] = False

    seed_dir = Path(config.seed_dir)
    if seed_dir.exists():
        try:
            report = load_registry_from_seed(
                store=store,
                seed_dir=seed_dir,
                caller=config.system_owner,
            )
            logger.info(
                "[startup] seeded nodes=%s links=%s skipped=%s",
                report.nodes,
                report.links,
                report.skipped,
            )
            store.metadata["seeded"] = True
        except Exception as exc:
            # Rows replayed before the failure stay registered.
            logger.exception("[startup] seed replay failed")
            store.metadata["load_error"] = str(exc)
    logger.info("[startup] get_registry total %.3fs", time.perf_counter() - t0)
    return store


def get_caller(
    request: Request,
    x_caller_identity: str | None = Header(default=None),
) -> str:
    """
    Authenticated caller identity for mutating routes.

    The header name is configurable; the default one is also bound
    through FastAPI's Header() so it shows up in the OpenAPI schema.
    """
    header = get_config().caller_header
    caller = request.headers.get(header) or x_caller_identity
    if not caller:
        raise HTTPException(status_code=401, detail=f"missing {header} header")
    return caller
