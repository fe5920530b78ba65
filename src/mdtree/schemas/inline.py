"""Inline element models.

Every string-bearing element except ``InlineCode`` carries prose that the
markdown renderer normalizes and escapes. ``InlineCode`` holds literal text.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class _InlineModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class PlainText(_InlineModel):
    """Running prose."""

    kind: Literal["text"] = "text"
    text: str


class Link(_InlineModel):
    """Hyperlink with optional title attribute."""

    kind: Literal["link"] = "link"
    href: str
    text: str
    title: str | None = None


class Image(_InlineModel):
    """Image reference with optional title attribute."""

    kind: Literal["image"] = "image"
    src: str
    alt: str
    title: str | None = None


class InlineCode(_InlineModel):
    """Literal code span, never escaped."""

    kind: Literal["code"] = "code"
    code: str


class Emphasis(_InlineModel):
    kind: Literal["emphasis"] = "emphasis"
    text: str


class StrongEmphasis(_InlineModel):
    kind: Literal["strong"] = "strong"
    text: str


class Strikethrough(_InlineModel):
    kind: Literal["strikethrough"] = "strikethrough"
    text: str


class LineBreak(_InlineModel):
    """Hard line break marker."""

    kind: Literal["break"] = "break"


InlineElement = Annotated[
    Union[
        PlainText,
        Link,
        Image,
        InlineCode,
        Emphasis,
        StrongEmphasis,
        Strikethrough,
        LineBreak,
    ],
    Field(discriminator="kind"),
]
