"""Test setup for mdtree."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from mdtree.schemas import ListBlock, ListItem, Paragraph, PlainText, Section  # noqa: E402


def para(text: str) -> Paragraph:
    return Paragraph(content=[PlainText(text=text)])


@pytest.fixture
def guide() -> Section:
    """Three-level document used by formatting and filtering tests."""
    return Section(
        title="Guide",
        body=[para("intro")],
        children=[
            Section(
                title="1. Install",
                body=[
                    para("run pip"),
                    ListBlock(items=[ListItem(content=[PlainText(text="step")], children=[para("detail")])]),
                ],
                children=[Section(title="Linux")],
            ),
            Section(title="Usage"),
        ],
    )
