"""Translate a section tree into an HTML display tree."""

from __future__ import annotations

import logging

try:
    from bs4 import BeautifulSoup, FeatureNotFound
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML presentation (pip install beautifulsoup4)."
    ) from exc

from mdtree.config import MAX_HTML_HEADING_LEVEL, MDTREE_HTML_PARSER
from mdtree.exceptions import ConfigurationError, ConversionError
from mdtree.fences import split_code_block
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
    Paragraph,
    PlainText,
    Quote,
    Section,
    Strikethrough,
    StrongEmphasis,
)

logger = logging.getLogger(__name__)

_EMPHASIS_TAGS: dict[type, str] = {
    Emphasis: "em",
    StrongEmphasis: "strong",
    Strikethrough: "del",
}


def present(section: Section, *, parser: str | None = None) -> BeautifulSoup:
    """Build a display tree for ``section``.

    Each section becomes a ``<section>`` element holding its heading, body
    blocks and child sections. Headings beyond ``<h6>`` fall back to a
    ``<div class="heading">`` carrying the level as data.

    Args:
        section: Root section of the document.
        parser: BeautifulSoup tree builder. Defaults to ``MDTREE_HTML_PARSER``.

    Raises:
        ConfigurationError: If the requested parser is not installed.
    """
    builder = parser or MDTREE_HTML_PARSER
    try:
        soup = BeautifulSoup("", builder)
    except FeatureNotFound as exc:
        raise ConfigurationError(f"HTML parser not available: {builder}") from exc

    logger.debug("Presenting section tree %r with %s", section.title, builder)
    soup.append(_present_section(soup, section, 1))
    return soup


def present_html(section: Section, *, parser: str | None = None) -> str:
    """Serialize the display tree of ``section`` to an HTML string."""
    return str(present(section, parser=parser))


def _present_section(soup: BeautifulSoup, section: Section, level: int) -> Tag:
    container = soup.new_tag("section")
    container.append(_present_heading(soup, section.title.strip(), level))
    for block in section.body:
        container.append(_present_block(soup, block))
    for child in section.children:
        container.append(_present_section(soup, child, level + 1))
    return container


def _present_heading(soup: BeautifulSoup, title: str, level: int) -> Tag:
    if level <= MAX_HTML_HEADING_LEVEL:
        heading = soup.new_tag(f"h{level}")
    else:
        heading = soup.new_tag(
            "div",
            attrs={
                "class": "heading",
                "role": "heading",
                "aria-level": str(level),
                "data-level": str(level),
            },
        )
    heading.string = title
    return heading


def _present_block(soup: BeautifulSoup, block: BlockElement) -> Tag:
    if isinstance(block, Paragraph):
        paragraph = soup.new_tag("p")
        _append_inlines(soup, paragraph, block.content)
        return paragraph

    if isinstance(block, ListBlock):
        container = soup.new_tag("ol" if block.ordered else "ul")
        for item in block.items:
            entry = soup.new_tag("li")
            _append_inlines(soup, entry, item.content)
            for child in item.children:
                entry.append(_present_block(soup, child))
            container.append(entry)
        return container

    if isinstance(block, CodeBlock):
        info, body = split_code_block(block.raw_text)
        pre = soup.new_tag("pre")
        code = soup.new_tag("code")
        if info:
            code["class"] = f"language-{info.split()[0]}"
        code.string = "\n".join(body)
        pre.append(code)
        return pre

    if isinstance(block, Quote):
        quote = soup.new_tag("blockquote")
        for child in block.blocks:
            quote.append(_present_block(soup, child))
        return quote

    raise ConversionError(f"Unsupported block element: {type(block).__name__}")


def _append_inlines(soup: BeautifulSoup, parent: Tag, content: tuple[InlineElement, ...]) -> None:
    for element in content:
        node = _present_inline(soup, element)
        if node is not None:
            parent.append(node)


def _present_inline(soup: BeautifulSoup, element: InlineElement) -> Tag | str | None:
    if isinstance(element, PlainText):
        return element.text or None

    if isinstance(element, Link):
        link = soup.new_tag("a", href=element.href)
        if element.title is not None:
            link["title"] = element.title
        link.string = element.text
        return link

    if isinstance(element, Image):
        image = soup.new_tag("img", src=element.src, alt=element.alt)
        if element.title is not None:
            image["title"] = element.title
        return image

    if isinstance(element, InlineCode):
        code = soup.new_tag("code")
        code.string = element.code
        return code

    tag_name = _EMPHASIS_TAGS.get(type(element))
    if tag_name is not None:
        emphasis = soup.new_tag(tag_name)
        emphasis.string = element.text
        return emphasis

    if isinstance(element, LineBreak):
        return soup.new_tag("br")

    raise ConversionError(f"Unsupported inline element: {type(element).__name__}")
