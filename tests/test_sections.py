"""Tests for section filtering."""

from __future__ import annotations

import pytest

from mdtree.schemas import Section
from mdtree.sections import filter_sections, normalize_section_title


def titles(sections) -> list:
    return [(section.title, titles(section.children)) for section in sections]


class TestNormalizeSectionTitle:
    """Tests for normalize_section_title function."""

    @pytest.mark.parametrize(
        ("title", "expected"),
        [
            ("  Introduction ", "introduction"),
            ("2.1  Related   Work", "related work"),
            ("3. Results", "results"),
            ("A Study", "a study"),
        ],
    )
    def test_normalizes(self, title: str, expected: str) -> None:
        """Numbering, case and whitespace are ignored."""
        assert normalize_section_title(title) == expected


class TestFilterSections:
    """Tests for filter_sections function."""

    def test_exclude(self, guide: Section) -> None:
        """Excluded sections are dropped along with their subtrees."""
        result = filter_sections([guide], selected=["install"])
        assert titles(result) == [("Guide", [("Usage", [])])]

    def test_include_keeps_ancestors(self, guide: Section) -> None:
        """Ancestors of included sections are kept with only matching children."""
        result = filter_sections([guide], mode="include", selected=["Linux"])
        assert titles(result) == [("Guide", [("1. Install", [("Linux", [])])])]

    def test_include_keeps_subtree(self, guide: Section) -> None:
        """An included section keeps all of its descendants."""
        result = filter_sections(guide.children, mode="include", selected=["Install"])
        assert titles(result) == [("1. Install", [("Linux", [])])]

    def test_does_not_mutate_input(self, guide: Section) -> None:
        """The original tree is left intact."""
        filter_sections([guide], selected=["usage"])
        assert len(guide.children) == 2

    def test_empty_selection_returns_input(self, guide: Section) -> None:
        """Without selected titles nothing is filtered."""
        assert filter_sections([guide], selected=["  "]) == (guide,)

    def test_unknown_mode(self, guide: Section) -> None:
        """Unknown modes are rejected."""
        with pytest.raises(ValueError, match="Unknown section filter mode"):
            filter_sections([guide], mode="only", selected=["x"])  # type: ignore[arg-type]
