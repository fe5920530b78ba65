"""Tests for document output formatting."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

from mdtree.output_formatter import count_blocks, count_sections, format_document, iter_sections
from mdtree.schemas import ListBlock, ListItem, Paragraph, PlainText, Quote, Section


class TestFormatDocument:
    """Tests for format_document function."""

    def test_sections_tree(self, guide: Section) -> None:
        """The outline lists every heading indented by depth."""
        with patch("mdtree.output_formatter.tiktoken", None):
            result = format_document(guide)
        assert result.sections_tree == (
            "Sections:\n# Guide\n    ## 1. Install\n        ### Linux\n    ## Usage"
        )

    def test_summary_without_tiktoken(self, guide: Section) -> None:
        """No token estimate is reported when tiktoken is missing."""
        with patch("mdtree.output_formatter.tiktoken", None):
            result = format_document(guide)
        assert result.summary == "Title: Guide\nSections: 4\nBlocks: 4"

    def test_summary_with_token_estimate(self, guide: Section) -> None:
        """Token counts are abbreviated."""
        fake = MagicMock()
        fake.get_encoding.return_value.encode.return_value = [0] * 1500
        with patch("mdtree.output_formatter.tiktoken", fake):
            result = format_document(guide)
        assert result.summary.endswith("Estimated tokens: 1.5k")

    def test_encoding_failure_skips_estimate(self, guide: Section) -> None:
        """Errors from the tokenizer do not fail formatting."""
        fake = MagicMock()
        fake.get_encoding.side_effect = ValueError("unknown encoding")
        with patch("mdtree.output_formatter.tiktoken", fake):
            result = format_document(guide)
        assert "Estimated tokens" not in result.summary

    def test_content_without_toc(self, guide: Section) -> None:
        """Content is the rendered Markdown."""
        with patch("mdtree.output_formatter.tiktoken", None):
            result = format_document(guide)
        assert result.content.startswith("# Guide\n\nintro\n\n## 1. Install\n\nrun pip\n\n* step")

    def test_content_with_toc(self) -> None:
        """The table of contents follows the document heading."""
        doc = Section(
            title="Doc",
            body=[Paragraph(content=[PlainText(text="intro")])],
            children=[Section(title="A", children=[Section(title="B")]), Section(title="C")],
        )
        with patch("mdtree.output_formatter.tiktoken", None):
            result = format_document(doc, include_toc=True)
        assert result.content == (
            "# Doc\n\n## Contents\n\n* A\n    * B\n* C\n\nintro\n\n## A\n\n### B\n\n## C"
        )

    def test_toc_skipped_without_children(self) -> None:
        """A document without child sections has no table of contents."""
        with patch("mdtree.output_formatter.tiktoken", None):
            result = format_document(Section(title="Solo"), include_toc=True)
        assert result.content == "# Solo"

    def test_toc_entries_are_escaped(self) -> None:
        """Titles shaped like list markers or emphasis are escaped in the contents."""
        doc = Section(title="Doc", children=[Section(title="1. Install"), Section(title="*star*")])
        with patch("mdtree.output_formatter.tiktoken", None):
            result = format_document(doc, include_toc=True)
        assert "## Contents\n\n* 1\\. Install\n* \\*star\\*\n\n" in result.content
        assert result.content.endswith("## 1. Install\n\n## *star*")

    def test_large_token_estimate(self) -> None:
        """Millions of tokens use the M suffix."""
        fake = MagicMock()
        fake.get_encoding.return_value.encode.return_value = [0] * 2_500_000
        with patch("mdtree.output_formatter.tiktoken", fake):
            result = format_document(Section(title="Big"))
        assert result.summary.endswith("Estimated tokens: 2.5M")


class TestCounting:
    """Tests for section and block counters."""

    def test_count_sections(self, guide: Section) -> None:
        """All sections in the tree are counted."""
        assert count_sections([guide]) == 4
        assert count_sections([]) == 0

    def test_count_blocks_descends_into_lists_and_quotes(self) -> None:
        """Nested blocks in list items and quotes are counted."""
        paragraph = Paragraph(content=[PlainText(text="x")])
        blocks = [
            ListBlock(items=[ListItem(children=[paragraph, Quote(blocks=[paragraph])])]),
            paragraph,
        ]
        assert count_blocks(blocks) == 5

    def test_iter_sections_yields_levels(self, guide: Section) -> None:
        """Sections come out in document order with their heading level."""
        assert [(level, node.title) for level, node in iter_sections(guide)] == [
            (1, "Guide"),
            (2, "1. Install"),
            (3, "Linux"),
            (2, "Usage"),
        ]
