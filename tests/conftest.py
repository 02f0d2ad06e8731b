from __future__ import annotations

import json
from pathlib import Path

import pytest

from toolbox_search_server.config import Config
from toolbox_search_server.query_controller import ManualScheduler
from toolbox_search_server.state import AppState, create_state


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


@pytest.fixture()
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture()
def state(monkeypatch: pytest.MonkeyPatch, scheduler: ManualScheduler) -> AppState:
    monkeypatch.delenv("CATALOG_PATH", raising=False)
    monkeypatch.delenv("HIGHLIGHT_CATEGORY", raising=False)
    monkeypatch.setenv("SEARCH_DEBOUNCE_MS", "180")
    monkeypatch.setenv("SESSION_TTL_SEC", "60")
    monkeypatch.setenv("SESSION_MAX_KEEP", "3")
    monkeypatch.setenv("LOG_LEVEL", "error")

    cfg = Config.from_env()
    return create_state(cfg, scheduler=scheduler)


@pytest.fixture()
def catalog_file(tmp_path: Path) -> Path:
    path = tmp_path / "catalog.json"
    _write(
        path,
        json.dumps(
            {
                "categories": [
                    {
                        "title": "Map  Tools",
                        "color": "bg-green-500",
                        "icon": "map-outline",
                        "tools": [
                            {"name": "MapTools Export", "icon": "map"},
                            {"name": "Route\tPlanner", "icon": "route"},
                        ],
                    },
                    {
                        "title": "Misc",
                        "color": "bg-gray-500",
                        "icon": "apps-outline",
                        "tools": [{"name": "abcabc", "icon": "abc"}],
                    },
                ]
            }
        ),
    )
    return path
