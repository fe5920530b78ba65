"""Serialize a section tree into canonical Markdown."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from mdtree.config import INDENT_WIDTH, ORDERED_MARKER, UNORDERED_MARKER
from mdtree.exceptions import ConversionError
from mdtree.fences import code_fence, inline_code_fence, split_code_block
from mdtree.schemas import (
    BlockElement,
    CodeBlock,
    Emphasis,
    Image,
    InlineCode,
    InlineElement,
    LineBreak,
    Link,
    ListBlock,
    ListItem,
    Paragraph,
    PlainText,
    Quote,
    Section,
    Strikethrough,
    StrongEmphasis,
)
from mdtree.text_utils import normalize, normalize_title

logger = logging.getLogger(__name__)

HARD_BREAK = "  "


def render(section: Section) -> str:
    """Render a section tree into Markdown, starting at header level 1."""
    logger.debug("Rendering section tree %r", section.title)
    return render_section(section, 1)


def render_section(section: Section, level: int) -> str:
    """Render a section heading, its body blocks and its child sections.

    Parameters
    ----------
    section : Section
        The section to render.
    level : int
        Number of ``#`` characters in the heading. There is no upper bound.
    """
    blocks = [render_heading(section.title, level)]
    blocks.extend(render_block(block, 0) for block in section.body)
    blocks.extend(render_section(child, level + 1) for child in section.children)
    return "\n\n".join(block for block in blocks if block)


def render_heading(title: str, level: int) -> str:
    return f"{'#' * level} {title.strip()}"


def render_block(block: BlockElement, indent_level: int) -> str:
    """Render one block element, indenting every line by ``indent_level`` steps."""
    if isinstance(block, Paragraph):
        return _indent_lines(_render_runs(block.content), indent_level)

    if isinstance(block, ListBlock):
        marker = ORDERED_MARKER if block.ordered else UNORDERED_MARKER
        return "\n".join(
            _render_list_item(item, marker, indent_level) for item in block.items
        )

    if isinstance(block, CodeBlock):
        return _render_code_block(block, indent_level)

    if isinstance(block, Quote):
        return _render_quote(block, indent_level)

    raise ConversionError(f"Unsupported block element: {type(block).__name__}")


def render_inline(element: InlineElement) -> str:
    """Render one inline element into its Markdown token."""
    if isinstance(element, PlainText):
        return normalize(element.text, escape=True)

    if isinstance(element, Link):
        text = normalize(element.text, escape=False)
        return f"[{text}]({element.href}{_render_title(element.title)})"

    if isinstance(element, Image):
        alt = normalize(element.alt, escape=False)
        return f"![{alt}]({element.src}{_render_title(element.title)})"

    if isinstance(element, InlineCode):
        fence = inline_code_fence(element.code)
        return f"{fence}{element.code}{fence}"

    if isinstance(element, Emphasis):
        return _wrap(element.text, "*")

    if isinstance(element, StrongEmphasis):
        return _wrap(element.text, "**")

    if isinstance(element, Strikethrough):
        return _wrap(element.text, "~~")

    if isinstance(element, LineBreak):
        return ""

    raise ConversionError(f"Unsupported inline element: {type(element).__name__}")


def _render_title(title: str | None) -> str:
    if title is None:
        return ""
    return f' "{normalize_title(title)}"'


def _wrap(text: str, delimiter: str) -> str:
    # Boundary spaces stay outside the delimiters.
    normalized = normalize(text, escape=False)
    core = normalized.strip(" ")
    if not core:
        return normalized
    lead = " " if normalized.startswith(" ") else ""
    trail = " " if normalized.endswith(" ") else ""
    return f"{lead}{delimiter}{core}{delimiter}{trail}"


def _join_fragments(fragments: Iterable[str]) -> str:
    run = ""
    for fragment in fragments:
        if run.endswith(" ") and fragment.startswith(" "):
            fragment = fragment[1:]
        run += fragment
    return run


def _render_runs(content: Sequence[InlineElement]) -> list[str]:
    """Group inline elements into lines split at each ``LineBreak``.

    Every line closed by a break ends with a hard break; the final line does not.
    """
    lines: list[str] = []
    fragments: list[str] = []
    for element in content:
        if isinstance(element, LineBreak):
            lines.append(_join_fragments(fragments).strip(" ") + HARD_BREAK)
            fragments = []
        else:
            fragments.append(render_inline(element))
    if fragments:
        lines.append(_join_fragments(fragments).strip(" "))
    return lines


def _indent_lines(lines: Iterable[str], indent_level: int) -> str:
    prefix = " " * (INDENT_WIDTH * indent_level)
    return "\n".join(prefix + line if line else line for line in lines)


def _render_list_item(item: ListItem, marker: str, indent_level: int) -> str:
    content_lines = _render_runs(item.content) or [""]
    lines = [_indent_lines([f"{marker} {content_lines[0]}"], indent_level)]
    if content_lines[1:]:
        lines.append(_indent_lines(content_lines[1:], indent_level + 1))

    rendered = [render_block(child, indent_level + 1) for child in item.children]
    children = "\n\n".join(child for child in rendered if child)
    if children:
        # Nested lists stay attached to the marker line.
        if not isinstance(item.children[0], ListBlock):
            lines.append("")
        lines.append(children)
    return "\n".join(lines)


def _render_code_block(block: CodeBlock, indent_level: int) -> str:
    info, body = split_code_block(block.raw_text)
    fence = code_fence(body)
    return _indent_lines([f"{fence}{info}", *body, fence], indent_level)


def _render_quote(block: Quote, indent_level: int) -> str:
    rendered = [render_block(child, 0) for child in block.blocks]
    combined = "\n\n".join(text for text in rendered if text)
    if not combined:
        return ""
    quoted = [f"> {line}" if line else ">" for line in combined.split("\n")]
    return _indent_lines(quoted, indent_level)
