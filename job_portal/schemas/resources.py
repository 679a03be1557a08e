# resources.py
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ResourceList(BaseModel):
    """Result shape of every resource read (distinct from the tool envelope)."""

    items: list[dict[str, Any]] = Field(default_factory=list)


class ToolInfo(BaseModel):
    name: str
    title: str
    description: str
    input_schema: dict[str, Any]


class ResourceInfo(BaseModel):
    name: str
    uri: str
    title: str
    description: str
    mime_type: str
    template: bool
