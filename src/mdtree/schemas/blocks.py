"""Block element models."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from mdtree.schemas.inline import InlineElement


class _BlockModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Paragraph(_BlockModel):
    """A run of inline elements; ``LineBreak`` splits it into lines."""

    kind: Literal["paragraph"] = "paragraph"
    content: tuple[InlineElement, ...] = ()


class CodeBlock(_BlockModel):
    """Fenced code block.

    The first line of ``raw_text`` is the info string (possibly empty). The
    remaining lines are the body as authored, including any indentation
    inherited from the surrounding source.
    """

    kind: Literal["code"] = "code"
    raw_text: str


class ListItem(BaseModel):
    """A list entry: inline content followed by optional nested blocks."""

    model_config = ConfigDict(frozen=True)

    content: tuple[InlineElement, ...] = ()
    children: tuple[BlockElement, ...] = ()


class ListBlock(_BlockModel):
    kind: Literal["list"] = "list"
    ordered: bool = False
    items: tuple[ListItem, ...] = ()


class Quote(_BlockModel):
    kind: Literal["quote"] = "quote"
    blocks: tuple[BlockElement, ...] = ()


BlockElement = Annotated[
    Union[Paragraph, ListBlock, CodeBlock, Quote],
    Field(discriminator="kind"),
]

ListItem.model_rebuild()
ListBlock.model_rebuild()
Quote.model_rebuild()
