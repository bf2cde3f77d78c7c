#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/knots/constants.py
"""Constants and default values for the knots renderer.

This module centralizes the default option values, the fixed CSS class names
used by the generated page, and the text templates that are part of the
rendered output.
"""

from __future__ import annotations

from typing import Literal

# Rendering option defaults
DEFAULT_SUMMARY = True
DEFAULT_SUMMARY_TITLE = "Summary"
DEFAULT_FAIL_ON_MISSING_PLUGIN = False
DEFAULT_KATEX_THROW_ON_ERROR = False

MermaidTheme = Literal["default", "base", "dark", "forest", "neutral"]
MERMAID_THEMES: frozenset[str] = frozenset({"default", "base", "dark", "forest", "neutral"})
DEFAULT_MERMAID_DARK_THEME: MermaidTheme = "dark"
DEFAULT_MERMAID_LIGHT_THEME: MermaidTheme = "base"

# Document text
AUTHOR_SEPARATOR = ", "
LICENSE_SENTENCE_TEMPLATE = "This work is available under the {license} license"

# Page structure classes and ids
DOCTITLE_ID = "doctitle"
LICENSE_ID = "license"
DOCINFO_CLASS = "docinfo"
LICENSE_CLASS = "docinfo discreet"
FLEX_CONTAINER_CLASS = "flex-container"
MAIN_CONTENT_CLASS = "main-content"
CONTAINER_CLASS_PREFIX = "container-lvl"
SUMMARY_CONTAINER_CLASS = "summary-container"
SUMMARY_CLASS = "summary"
SUMMARY_CONTENT_CLASS = "summary-content"
SUMMARY_LEVEL_CLASS_PREFIX = "lvl"

# Feature markers
CODE_LANGUAGE_PREFIX = "language-"
CODE_LANGUAGE_NONE = "language-none"
KATEX_CLASS = "katex-math"
KATEX_DISPLAY_CLASS = "katex-math katex-display"
KATEX_INDEX_ATTR = "data-katex-index"
MERMAID_CLASS = "mermaid"

# Largest heading element HTML provides; deeper levels still keep their level
# in the summary classes.
MAX_HTML_HEADING_LEVEL = 6

# Link URL safety
DANGEROUS_SCHEMES = (
    "javascript:",
    "vbscript:",
    "data:text/html",
    "data:text/javascript",
    "data:application/javascript",
    "data:application/x-javascript",
)
NEUTRALIZED_HREF = "#"

# Parser interchange
AST_SCHEMA_VERSION = 1
