"""Format a section tree into summary, outline, and content outputs."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

try:
    import tiktoken
except ImportError:  # pragma: no cover - optional dependency
    tiktoken = None

from mdtree.config import INDENT_WIDTH, MDTREE_TOKEN_ENCODING, UNORDERED_MARKER
from mdtree.markdown import render, render_heading
from mdtree.schemas import BlockElement, ListBlock, Quote, RenderResult, Section
from mdtree.text_utils import normalize

logger = logging.getLogger(__name__)

# Largest unit first.
_TOKEN_UNITS = ((1_000_000, "M"), (1_000, "k"))


def format_document(section: Section, *, include_toc: bool = False) -> RenderResult:
    """Create summary, section outline, and content for a document tree."""
    outline = "Sections:\n" + _render_outline(section)
    content = _render_content(section, include_toc=include_toc)

    summary_lines = [
        f"Title: {section.title.strip()}",
        f"Sections: {count_sections([section])}",
        f"Blocks: {count_blocks(block for _, node in iter_sections(section) for block in node.body)}",
    ]

    token_estimate = _estimate_tokens(outline + "\n" + content)
    if token_estimate:
        summary_lines.append(f"Estimated tokens: {token_estimate}")

    summary = "\n".join(summary_lines)
    logger.debug("Formatted document %r: %s", section.title, summary.replace("\n", "; "))

    return RenderResult(summary=summary, sections_tree=outline, content=content)


def iter_sections(section: Section, level: int = 1) -> Iterator[tuple[int, Section]]:
    """Yield ``(heading level, section)`` pairs in document order."""
    yield level, section
    for child in section.children:
        yield from iter_sections(child, level + 1)


def count_sections(sections: Iterable[Section]) -> int:
    """Count every section in the given trees, roots included."""
    return sum(1 for root in sections for _ in iter_sections(root))


def count_blocks(blocks: Iterable[BlockElement]) -> int:
    """Count blocks, including those nested in list items and quotes."""
    total = 0
    for block in blocks:
        total += 1
        if isinstance(block, ListBlock):
            for item in block.items:
                total += count_blocks(item.children)
        elif isinstance(block, Quote):
            total += count_blocks(block.blocks)
    return total


def _render_content(section: Section, *, include_toc: bool) -> str:
    content = render(section)
    if not include_toc or not section.children:
        return content

    heading, _, rest = content.partition("\n\n")
    blocks = [heading, render_heading("Contents", 2), _render_toc(section), rest]
    return "\n\n".join(block for block in blocks if block)


def _render_toc(section: Section) -> str:
    # Entries are escaped like body text so titles cannot open lists or emphasis.
    lines = []
    for level, node in iter_sections(section):
        if level == 1:
            continue
        indent = " " * ((level - 2) * INDENT_WIDTH)
        lines.append(f"{indent}{UNORDERED_MARKER} {normalize(node.title.strip(), escape=True)}")
    return "\n".join(lines)


def _render_outline(section: Section) -> str:
    return "\n".join(
        " " * ((level - 1) * INDENT_WIDTH) + render_heading(node.title, level)
        for level, node in iter_sections(section)
    )


def _estimate_tokens(text: str) -> str | None:
    if not tiktoken:
        return None
    try:
        encoding = tiktoken.get_encoding(MDTREE_TOKEN_ENCODING)
        count = len(encoding.encode(text, disallowed_special=()))
    except Exception:
        logger.debug("Token estimate unavailable for encoding %s", MDTREE_TOKEN_ENCODING, exc_info=True)
        return None

    for threshold, suffix in _TOKEN_UNITS:
        if count >= threshold:
            return f"{count / threshold:.1f}{suffix}"
    return str(count)
