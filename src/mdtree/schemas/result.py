"""Formatted document output model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class RenderResult(BaseModel):
    """Final formatting output."""

    model_config = ConfigDict(frozen=True)

    summary: str
    sections_tree: str
    content: str
