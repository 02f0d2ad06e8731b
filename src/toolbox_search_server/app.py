from __future__ import annotations

import argparse
import time
from typing import Any, Callable

from fastmcp import FastMCP

from .errors import ToolError
from .state import AppState, create_state
from .tools_search import catalog_ls as catalog_ls_impl
from .tools_search import search_close as search_close_impl
from .tools_search import search_open as search_open_impl
from .tools_search import search_reset as search_reset_impl
from .tools_search import search_results as search_results_impl
from .tools_search import search_select as search_select_impl
from .tools_search import search_set_query as search_set_query_impl
from .tools_search import tool_search as tool_search_impl


def _execute(state: AppState, tool: str, fn: Callable[..., dict[str, Any]], *args: Any, **kwargs: Any) -> dict[str, Any]:
    started = time.monotonic()
    try:
        out = fn(*args, **kwargs)
        fields: dict[str, Any] = {}
        if isinstance(out, dict):
            if "session_id" in out:
                fields["session_id"] = out.get("session_id")
            if "total" in out:
                fields["results"] = out.get("total")
            query = out.get("query")
            if isinstance(query, str):
                fields["query_len"] = len(query)
            if tool == "catalog_ls":
                fields["categories"] = len(out.get("categories") or [])
        state.logger.emit(tool=tool, ok=True, elapsed_ms=int((time.monotonic() - started) * 1000), **fields)
        return out
    except ToolError as e:
        state.logger.emit(tool=tool, ok=False, level="error", elapsed_ms=int((time.monotonic() - started) * 1000), code=e.code)
        return e.to_dict()
    except Exception as e:  # pragma: no cover - defensive guard
        state.logger.emit(tool=tool, ok=False, level="error", elapsed_ms=int((time.monotonic() - started) * 1000), code="conflict")
        return ToolError(code="conflict", message=str(e)).to_dict()


def create_app(state: AppState | None = None) -> FastMCP:
    app_state = state or create_state()
    mcp = FastMCP("toolbox_search_server")

    @mcp.tool()
    def catalog_ls() -> dict[str, Any]:
        return _execute(app_state, "catalog_ls", lambda: catalog_ls_impl(app_state))

    @mcp.tool()
    def tool_search(query: str, limit: int | None = None) -> dict[str, Any]:
        return _execute(app_state, "tool_search", lambda: tool_search_impl(app_state, query=query, limit=limit))

    # Session tools are async so the debounce timers land on the server's event loop.
    @mcp.tool()
    async def search_open(query: str | None = None) -> dict[str, Any]:
        return _execute(app_state, "search_open", lambda: search_open_impl(app_state, query=query))

    @mcp.tool()
    async def search_set_query(session_id: str, query: str) -> dict[str, Any]:
        return _execute(
            app_state,
            "search_set_query",
            lambda: search_set_query_impl(app_state, session_id=session_id, query=query),
        )

    @mcp.tool()
    async def search_results(session_id: str, limit: int | None = None) -> dict[str, Any]:
        return _execute(
            app_state,
            "search_results",
            lambda: search_results_impl(app_state, session_id=session_id, limit=limit),
        )

    @mcp.tool()
    async def search_reset(session_id: str) -> dict[str, Any]:
        return _execute(app_state, "search_reset", lambda: search_reset_impl(app_state, session_id=session_id))

    @mcp.tool()
    async def search_close(session_id: str) -> dict[str, Any]:
        return _execute(app_state, "search_close", lambda: search_close_impl(app_state, session_id=session_id))

    @mcp.tool()
    async def search_select(session_id: str, name: str) -> dict[str, Any]:
        return _execute(
            app_state,
            "search_select",
            lambda: search_select_impl(app_state, session_id=session_id, name=name),
        )

    return mcp


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--stdio", action="store_true", default=False)
    args = parser.parse_args()
    mcp = create_app()
    if args.stdio:
        try:
            mcp.run(transport="stdio")
        except TypeError:
            mcp.run()
    else:
        mcp.run()


if __name__ == "__main__":
    main()
