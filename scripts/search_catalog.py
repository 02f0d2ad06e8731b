#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path

from toolbox_search_server.config import Config
from toolbox_search_server.errors import ToolError
from toolbox_search_server.state import create_state
from toolbox_search_server.tools_search import tool_search


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search the tool catalog and print highlighted matches.")
    parser.add_argument("query", help="Search text; case and whitespace are ignored")
    parser.add_argument("--catalog", default=None, help="JSON catalog file (defaults to the built-in catalog)")
    parser.add_argument("--limit", type=int, default=None)
    parser.add_argument("--json", action="store_true", help="Emit result rows as JSON")
    return parser.parse_args()


def _mark(part: dict[str, str]) -> str:
    if not part.get("match"):
        return part["before"]
    return f"{part['before']}[{part['match']}]{part['after']}"


def main() -> int:
    args = _parse_args()
    cfg = Config.from_env()
    if args.catalog:
        cfg = replace(cfg, catalog_path=Path(args.catalog).expanduser().resolve())
    try:
        state = create_state(cfg)
        out = tool_search(state, query=args.query, limit=args.limit)
    except ToolError as e:
        print(json.dumps(e.to_dict(), ensure_ascii=False), file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(out, ensure_ascii=False, indent=2))
        return 0
    if out["empty"]:
        print("No tools found")
        return 0
    for item in out["items"]:
        category = _mark(item["category_highlight"]) if "category_highlight" in item else item["category"]
        print(f"{_mark(item['name_highlight'])}\t{category}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
