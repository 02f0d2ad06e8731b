from __future__ import annotations

from pydantic import BaseModel, Field


class ToolModel(BaseModel):
    name: str = Field(min_length=1)
    icon: str = ""


class CategoryModel(BaseModel):
    title: str = Field(min_length=1)
    color: str = ""
    icon: str = ""
    tools: list[ToolModel] = Field(default_factory=list)


class CatalogFile(BaseModel):
    categories: list[CategoryModel]


class HighlightOut(BaseModel):
    before: str
    match: str = ""
    after: str = ""


class EntryOut(BaseModel):
    name: str
    category: str
    color: str
    icon: str
    name_highlight: HighlightOut
    category_highlight: HighlightOut | None = None
