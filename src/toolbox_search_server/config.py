from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Config:
    catalog_path: Path | None
    debounce_ms: int
    session_max_keep: int
    session_ttl_sec: int
    log_level: str
    highlight_category: bool

    @classmethod
    def from_env(cls) -> "Config":
        raw_catalog = os.getenv("CATALOG_PATH")
        catalog_path = Path(raw_catalog).expanduser().resolve() if raw_catalog else None
        debounce_ms = _env_int("SEARCH_DEBOUNCE_MS", 180)
        if not 0 <= debounce_ms <= 10000:
            raise ValueError("SEARCH_DEBOUNCE_MS must be between 0 and 10000")

        return cls(
            catalog_path=catalog_path,
            debounce_ms=debounce_ms,
            session_max_keep=_env_int("SESSION_MAX_KEEP", 32),
            session_ttl_sec=_env_int("SESSION_TTL_SEC", 1800),
            log_level=os.getenv("LOG_LEVEL", "error").strip().lower(),
            highlight_category=_env_bool("HIGHLIGHT_CATEGORY", True),
        )
