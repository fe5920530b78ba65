"""Backtick fence sizing and code body indentation helpers."""

from __future__ import annotations

import re
from typing import Iterable

from mdtree.config import MIN_FENCE_LENGTH

_BACKTICK_RUN_RE = re.compile(r"`+")
_LINE_END_RE = re.compile(r"\r\n|\r|\n")


def leading_backtick_run(line: str) -> int:
    """Count the backticks opening ``line`` once surrounding whitespace is stripped."""
    stripped = line.strip()
    return len(stripped) - len(stripped.lstrip("`"))


def longest_backtick_run(text: str) -> int:
    """Length of the longest run of consecutive backticks anywhere in ``text``."""
    return max((len(match) for match in _BACKTICK_RUN_RE.findall(text)), default=0)


def code_fence(lines: Iterable[str]) -> str:
    """Backtick fence long enough that no body line can close it early."""
    longest = max((leading_backtick_run(line) for line in lines), default=0)
    return "`" * max(MIN_FENCE_LENGTH, longest + 1)


def inline_code_fence(code: str) -> str:
    """Backtick delimiter for a code span containing ``code``."""
    return "`" * (longest_backtick_run(code) + 1)


def leading_spaces(line: str) -> int:
    return len(line) - len(line.lstrip(" "))


def trim_indent(lines: list[str]) -> list[str]:
    """Strip the first line's leading-space count from every line.

    Lines with fewer leading spaces lose only the spaces they have.
    """
    if not lines:
        return []
    width = leading_spaces(lines[0])
    return [line[min(width, leading_spaces(line)):] for line in lines]


def split_code_block(raw_text: str) -> tuple[str, list[str]]:
    """Split raw code block text into its info string and body lines.

    ``\\r\\n``, ``\\r`` and ``\\n`` all end a line. The body is de-indented with
    :func:`trim_indent` and loses one trailing empty line, if present.
    """
    header, *rest = _LINE_END_RE.split(raw_text)
    body = trim_indent(rest)
    if body and not body[-1]:
        body.pop()
    return header.strip(), body
