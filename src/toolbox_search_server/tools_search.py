from __future__ import annotations

from typing import Any

from .catalog import SearchableEntry
from .errors import ToolError, ensure
from .highlight import highlight
from .models import EntryOut, HighlightOut
from .session_store import SearchSession
from .state import AppState


def _parse_int_param(
    value: Any,
    *,
    name: str,
    default: int | None,
    min_value: int | None = None,
) -> int | None:
    if value is None:
        return default
    if isinstance(value, bool):
        raise ToolError("invalid_parameter", f"{name} must be an integer")
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ToolError("invalid_parameter", f"{name} must be an integer")
    if min_value is not None and parsed < min_value:
        raise ToolError("invalid_parameter", f"{name} must be >= {min_value}")
    return parsed


def _parse_query(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ToolError("invalid_parameter", "query must be a string")
    return value


def _entry_row(state: AppState, entry: SearchableEntry, query: str) -> dict[str, Any]:
    category_highlight = None
    if state.config.highlight_category:
        category_highlight = HighlightOut(**highlight(entry.category_title, query).to_dict())
    row = EntryOut(
        name=entry.name,
        category=entry.category_title,
        color=entry.category_color,
        icon=entry.icon_ref,
        name_highlight=HighlightOut(**highlight(entry.name, query).to_dict()),
        category_highlight=category_highlight,
    )
    return row.model_dump(exclude_none=True)


def _result_rows(state: AppState, entries: list[SearchableEntry], query: str, limit: int | None) -> dict[str, Any]:
    shown = entries if limit is None else entries[:limit]
    return {
        "total": len(entries),
        "empty": not entries,
        "items": [_entry_row(state, entry, query) for entry in shown],
    }


def _session_view(state: AppState, session: SearchSession, limit: int | None = None) -> dict[str, Any]:
    controller = session.controller
    out: dict[str, Any] = {
        "session_id": session.session_id,
        "query": controller.raw,
        "debounced_query": controller.debounced,
        "pending": controller.pending,
    }
    # Rows come from the debounced filter but are highlighted with the raw text being typed.
    out.update(_result_rows(state, session.results, controller.raw, limit))
    return out


def _require_session(state: AppState, session_id: str) -> SearchSession:
    ensure(bool(session_id), "invalid_parameter", "session_id is required")
    session = state.sessions.get(session_id)
    if session is None:
        raise ToolError("not_found", "session_id not found", {"session_id": session_id})
    return session


def catalog_ls(state: AppState) -> dict[str, Any]:
    return {
        "categories": [
            {
                "title": cat.title,
                "tag": cat.tag,
                "color": cat.color,
                "icon": cat.icon,
                "tools": [{"name": tool.name, "icon": tool.icon_ref} for tool in cat.tools],
            }
            for cat in state.catalog.categories
        ]
    }


def tool_search(state: AppState, query: str | None = None, limit: int | None = None) -> dict[str, Any]:
    applied_query = _parse_query(query)
    applied_limit = _parse_int_param(limit, name="limit", default=None, min_value=1)
    entries = state.catalog.filter(applied_query)
    out: dict[str, Any] = {"query": applied_query}
    out.update(_result_rows(state, entries, applied_query, applied_limit))
    return out


def search_open(state: AppState, query: str | None = None) -> dict[str, Any]:
    session = state.sessions.open(
        state.catalog,
        state.scheduler,
        debounce_ms=state.config.debounce_ms,
        initial_query=_parse_query(query),
    )
    return _session_view(state, session)


def search_set_query(state: AppState, session_id: str, query: str | None) -> dict[str, Any]:
    session = _require_session(state, session_id)
    session.controller.set_query(_parse_query(query))
    return _session_view(state, session)


def search_results(state: AppState, session_id: str, limit: int | None = None) -> dict[str, Any]:
    session = _require_session(state, session_id)
    applied_limit = _parse_int_param(limit, name="limit", default=None, min_value=1)
    return _session_view(state, session, applied_limit)


def search_reset(state: AppState, session_id: str) -> dict[str, Any]:
    session = _require_session(state, session_id)
    session.controller.reset()
    return _session_view(state, session)


def search_close(state: AppState, session_id: str) -> dict[str, Any]:
    ensure(bool(session_id), "invalid_parameter", "session_id is required")
    closed = state.sessions.close(session_id)
    ensure(closed, "not_found", "session_id not found", {"session_id": session_id})
    return {"session_id": session_id, "closed": True}


def search_select(state: AppState, session_id: str, name: str) -> dict[str, Any]:
    session = _require_session(state, session_id)
    ensure(bool(name), "invalid_parameter", "name is required")
    entry = next((item for item in session.results if item.name == name), None)
    if entry is None:
        raise ToolError("not_found", "tool is not in the current results", {"name": name})
    state.sessions.close(session_id)
    return {"session_id": session_id, "tool": entry.to_dict()}
