from __future__ import annotations

import json

import toolbox_search_server.app as app_module
from toolbox_search_server.app import create_app
from toolbox_search_server.errors import ToolError
from toolbox_search_server.logging_jsonl import JsonlLogger


def test_app_create_smoke(state) -> None:
    app = create_app(state)
    assert app is not None


def test_execute_success_is_quiet_at_error_level(state, capsys) -> None:
    out = app_module._execute(state, "tool_search", lambda: {"query": "pdf", "total": 6, "items": []})
    assert out["total"] == 6
    assert capsys.readouterr().err == ""


def test_execute_logs_summary_fields(state, monkeypatch) -> None:
    rows: list[dict[str, object]] = []

    def fake_emit(**kwargs):  # type: ignore[no-untyped-def]
        rows.append(dict(kwargs))

    monkeypatch.setattr(state.logger, "emit", fake_emit)
    app_module._execute(state, "search_set_query", lambda: {"session_id": "s1", "query": "map", "total": 0, "items": []})

    assert rows[0]["tool"] == "search_set_query"
    assert rows[0]["ok"] is True
    assert rows[0]["session_id"] == "s1"
    assert rows[0]["results"] == 0
    assert rows[0]["query_len"] == 3


def test_execute_logs_tool_error(state, monkeypatch) -> None:
    rows: list[dict[str, object]] = []

    def fake_emit(**kwargs):  # type: ignore[no-untyped-def]
        rows.append(dict(kwargs))

    monkeypatch.setattr(state.logger, "emit", fake_emit)
    out = app_module._execute(
        state,
        "search_results",
        lambda: (_ for _ in ()).throw(ToolError("not_found", "session_id not found")),
    )

    assert out == {"code": "not_found", "message": "session_id not found"}
    assert len(rows) == 1
    assert rows[0]["ok"] is False
    assert rows[0]["level"] == "error"
    assert rows[0]["code"] == "not_found"


def test_tool_error_unknown_code_falls_back() -> None:
    err = ToolError("weird", "bad")
    assert err.code == "invalid_parameter"
    assert err.to_dict() == {"code": "invalid_parameter", "message": "bad"}


def test_jsonl_logger_emits_error_only(capsys) -> None:
    logger = JsonlLogger()
    logger.emit(tool="tool_search", ok=True, elapsed_ms=1, level="info")
    logger.emit(tool="tool_search", ok=False, elapsed_ms=2, level="error", code="invalid_parameter")
    lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]

    assert len(lines) == 1
    payload = json.loads(lines[0])
    assert payload["level"] == "error"
    assert payload["code"] == "invalid_parameter"


def test_jsonl_logger_info_level(capsys) -> None:
    logger = JsonlLogger(level="info")
    logger.emit(tool="catalog_ls", ok=True, elapsed_ms=0, categories=6)
    logger.emit(tool="catalog_ls", ok=True, elapsed_ms=0, level="debug")
    lines = [line for line in capsys.readouterr().err.splitlines() if line.strip()]
    assert len(lines) == 1
    assert json.loads(lines[0])["categories"] == 6


def test_jsonl_logger_unknown_level_defaults_to_error() -> None:
    assert JsonlLogger(level="loud").level == "error"
