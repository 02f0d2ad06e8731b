from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

from pydantic import ValidationError

from .catalog_data import CATEGORIES
from .errors import ToolError
from .models import CatalogFile
from .normalization import contains, normalize_text

SLUG_SPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class CatalogItem:
    name: str
    category_tag: str
    icon_ref: str


@dataclass(frozen=True)
class Category:
    title: str
    color: str
    icon: str
    tools: tuple[CatalogItem, ...]

    @property
    def tag(self) -> str:
        return category_tag(self.title)


@dataclass(frozen=True)
class SearchableEntry:
    name: str
    category_tag: str
    icon_ref: str
    category_title: str
    category_color: str

    def to_dict(self) -> dict[str, str]:
        return {
            "name": self.name,
            "category": self.category_title,
            "category_tag": self.category_tag,
            "color": self.category_color,
            "icon": self.icon_ref,
        }


def category_tag(title: str) -> str:
    return SLUG_SPACE_RE.sub("-", title.strip()).lower()


def categories_from_rows(rows: Iterable[dict[str, Any]]) -> list[Category]:
    try:
        parsed = CatalogFile(categories=list(rows))
    except ValidationError as e:
        raise ToolError("invalid_parameter", "invalid catalog", {"errors": e.error_count()}) from e
    categories: list[Category] = []
    for cat in parsed.categories:
        tag = category_tag(cat.title)
        tools = tuple(CatalogItem(name=tool.name, category_tag=tag, icon_ref=tool.icon) for tool in cat.tools)
        categories.append(Category(title=cat.title, color=cat.color, icon=cat.icon, tools=tools))
    return categories


def load_catalog_file(path: Path) -> list[Category]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ToolError("not_found", "catalog file not found", {"path": str(path)}) from e
    except json.JSONDecodeError as e:
        raise ToolError("invalid_parameter", "catalog file is not valid JSON", {"path": str(path)}) from e
    rows = data.get("categories") if isinstance(data, dict) else data
    if not isinstance(rows, list):
        raise ToolError("invalid_parameter", "catalog file must hold a list of categories", {"path": str(path)})
    return categories_from_rows(rows)


def load_catalog(path: Path | None = None) -> list[Category]:
    if path is None:
        return categories_from_rows(CATEGORIES)
    return load_catalog_file(path)


def build_index(categories: Iterable[Category]) -> list[SearchableEntry]:
    return [
        SearchableEntry(
            name=tool.name,
            category_tag=tool.category_tag,
            icon_ref=tool.icon_ref,
            category_title=cat.title,
            category_color=cat.color,
        )
        for cat in categories
        for tool in cat.tools
    ]


def entry_matches(entry: SearchableEntry, query: str) -> bool:
    return contains(entry.name, query) or contains(entry.category_title, query)


def filter_entries(entries: list[SearchableEntry], query: str) -> list[SearchableEntry]:
    if not normalize_text(query):
        return entries
    return [entry for entry in entries if entry_matches(entry, query)]


class CatalogIndex:
    """Categories plus their flattened, enriched entry list, built once."""

    def __init__(self, categories: list[Category]) -> None:
        self.categories = tuple(categories)
        self._entries: list[SearchableEntry] | None = None

    @property
    def entries(self) -> list[SearchableEntry]:
        if self._entries is None:
            self._entries = build_index(self.categories)
        return self._entries

    def filter(self, query: str) -> list[SearchableEntry]:
        return filter_entries(self.entries, query)
