"""mdtree: serialize structured document trees into canonical Markdown."""

from mdtree.exceptions import ConfigurationError, ConversionError, MdtreeError
from mdtree.markdown import render
from mdtree.output_formatter import format_document
from mdtree.presentation import present, present_html
from mdtree.schemas import (
    CodeBlock,
    Emphasis,
    Image,
    InlineCode,
    LineBreak,
    Link,
    ListBlock,
    ListItem,
    Paragraph,
    PlainText,
    Quote,
    RenderResult,
    Section,
    Strikethrough,
    StrongEmphasis,
)
from mdtree.sections import filter_sections

__all__ = [
    "CodeBlock",
    "ConfigurationError",
    "ConversionError",
    "Emphasis",
    "Image",
    "InlineCode",
    "LineBreak",
    "Link",
    "ListBlock",
    "ListItem",
    "MdtreeError",
    "Paragraph",
    "PlainText",
    "Quote",
    "RenderResult",
    "Section",
    "Strikethrough",
    "StrongEmphasis",
    "filter_sections",
    "format_document",
    "present",
    "present_html",
    "render",
]
