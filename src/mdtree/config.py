"""Local configuration for mdtree."""

from __future__ import annotations

import os
from typing import Final


DEFAULT_TOKEN_ENCODING = "o200k_base"
DEFAULT_HTML_PARSER = "html.parser"

# Markdown layout constants.
INDENT_WIDTH: Final = 4
MIN_FENCE_LENGTH: Final = 3
UNORDERED_MARKER: Final = "*"
ORDERED_MARKER: Final = "1."

# Deepest heading with a native HTML element; deeper levels use a generic container.
MAX_HTML_HEADING_LEVEL: Final = 6

MDTREE_TOKEN_ENCODING = os.getenv("MDTREE_TOKEN_ENCODING", DEFAULT_TOKEN_ENCODING)
MDTREE_HTML_PARSER = os.getenv("MDTREE_HTML_PARSER", DEFAULT_HTML_PARSER)
