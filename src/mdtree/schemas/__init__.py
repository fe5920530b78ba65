"""Shared schemas for mdtree."""

from mdtree.schemas.blocks import (
    BlockElement,
    CodeBlock,
    ListBlock,
    ListItem,
    Paragraph,
    Quote,
)
from mdtree.schemas.inline import (
    Emphasis,
    Image,
    InlineCode,
    InlineElement,
    LineBreak,
    Link,
    PlainText,
    Strikethrough,
    StrongEmphasis,
)
from mdtree.schemas.result import RenderResult
from mdtree.schemas.sections import Section

__all__ = [
    "BlockElement",
    "CodeBlock",
    "Emphasis",
    "Image",
    "InlineCode",
    "InlineElement",
    "LineBreak",
    "Link",
    "ListBlock",
    "ListItem",
    "Paragraph",
    "PlainText",
    "Quote",
    "RenderResult",
    "Section",
    "Strikethrough",
    "StrongEmphasis",
]
