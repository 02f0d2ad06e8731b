from __future__ import annotations

from dataclasses import dataclass

from .catalog import CatalogIndex, load_catalog
from .config import Config
from .logging_jsonl import JsonlLogger
from .query_controller import AsyncioScheduler, Scheduler
from .session_store import SessionStore


@dataclass
class AppState:
    config: Config
    logger: JsonlLogger
    catalog: CatalogIndex
    sessions: SessionStore
    scheduler: Scheduler


def create_state(config: Config | None = None, scheduler: Scheduler | None = None) -> AppState:
    cfg = config or Config.from_env()
    return AppState(
        config=cfg,
        logger=JsonlLogger(level=cfg.log_level),
        catalog=CatalogIndex(load_catalog(cfg.catalog_path)),
        sessions=SessionStore(max_keep=cfg.session_max_keep, ttl_sec=cfg.session_ttl_sec),
        scheduler=scheduler or AsyncioScheduler(),
    )
