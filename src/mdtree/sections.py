"""Section filtering and utilities."""

from __future__ import annotations

import re
from typing import Iterable, Literal, Sequence

from mdtree.schemas import Section

_NUMBERING_RE = re.compile(r"^\d+(?:\.\d+)*\.?\s+")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_section_title(title: str) -> str:
    """Normalize section titles for comparison."""
    title = title.strip().lower()
    title = _NUMBERING_RE.sub("", title)
    return _WHITESPACE_RE.sub(" ", title)


def filter_sections(
    sections: Sequence[Section],
    *,
    mode: Literal["include", "exclude"] = "exclude",
    selected: Iterable[str] | None = None,
) -> tuple[Section, ...]:
    """Filter sections by title using include or exclude mode.

    Sections are immutable, so kept ancestors are copied with their filtered
    children rather than modified in place.
    """
    if mode not in ("include", "exclude"):
        raise ValueError(f"Unknown section filter mode: {mode!r}")

    selected_titles = {normalize_section_title(title) for title in (selected or []) if title.strip()}
    if not selected_titles:
        return tuple(sections)

    def _filter(nodes: Sequence[Section]) -> tuple[Section, ...]:
        result: list[Section] = []
        for node in nodes:
            in_selected = normalize_section_title(node.title) in selected_titles
            if mode == "include":
                if in_selected:
                    result.append(node)
                else:
                    children = _filter(node.children)
                    if children:
                        result.append(node.model_copy(update={"children": children}))
            else:
                if in_selected:
                    continue
                result.append(node.model_copy(update={"children": _filter(node.children)}))
        return tuple(result)

    return _filter(sections)
