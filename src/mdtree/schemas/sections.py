"""Section tree models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from mdtree.schemas.blocks import BlockElement


class Section(BaseModel):
    """A titled section: body blocks followed by nested child sections."""

    model_config = ConfigDict(frozen=True)

    title: str
    body: tuple[BlockElement, ...] = ()
    children: tuple["Section", ...] = ()


Section.model_rebuild()
