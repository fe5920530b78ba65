"""Whitespace normalization and markdown escaping for prose text."""

from __future__ import annotations

import re

# Code points treated as word separators.
WHITESPACE_CHARS = (
    "\t\n\x0b\x0c\r "
    "\x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
MARKDOWN_SPECIAL_CHARS = "\\`*_{}[]()#+-!>~"

_WHITESPACE_RUN_RE = re.compile(f"[{re.escape(WHITESPACE_CHARS)}]+")
_SPECIAL_CHAR_RE = re.compile(f"([{re.escape(MARKDOWN_SPECIAL_CHARS)}])")
_LIST_MARKER_RE = re.compile(r"^([0-9]+)\.")


def is_whitespace(char: str) -> bool:
    """Return True if ``char`` is one of the collapsible whitespace code points."""
    return len(char) == 1 and char in WHITESPACE_CHARS


def escape_markdown(text: str) -> str:
    """Backslash-escape every markdown-significant character."""
    return _SPECIAL_CHAR_RE.sub(r"\\\1", text)


def escape_list_marker(word: str) -> str:
    """Escape the dot of a leading ``<digits>.`` so it cannot start an ordered list."""
    return _LIST_MARKER_RE.sub(r"\1\\.", word, count=1)


def escape_quotes(text: str) -> str:
    """Escape double quotes for use inside a quoted title attribute."""
    return text.replace('"', '\\"')


def normalize(text: str, *, escape: bool = True) -> str:
    """Collapse whitespace runs to single spaces, optionally escaping markdown.

    Boundary whitespace is kept as a single space on each side so that
    fragments normalized separately can be concatenated without gluing words
    together. Text made only of whitespace becomes a single space.

    Args:
        text: Raw prose.
        escape: Escape markdown-significant characters and guard the first
            word against being read as an ordered-list marker.

    Returns:
        Normalized text.
    """
    if not text:
        return ""

    source = escape_markdown(text) if escape else text
    words = [word for word in _WHITESPACE_RUN_RE.split(source) if word]
    if not words:
        return " "

    if escape:
        words[0] = escape_list_marker(words[0])

    result = " ".join(words)
    if is_whitespace(text[0]):
        result = " " + result
    if is_whitespace(text[-1]):
        result = result + " "
    return result


def normalize_title(text: str) -> str:
    """Normalize text bound for a quoted title attribute."""
    return escape_quotes(normalize(text, escape=False))
