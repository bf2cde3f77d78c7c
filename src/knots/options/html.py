#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for rendering Knots documents to HTML."""

from __future__ import annotations

from dataclasses import dataclass, field

from knots.constants import (
    DEFAULT_KATEX_THROW_ON_ERROR,
    DEFAULT_MERMAID_DARK_THEME,
    DEFAULT_MERMAID_LIGHT_THEME,
    DEFAULT_SUMMARY,
    DEFAULT_SUMMARY_TITLE,
    MERMAID_THEMES,
    MermaidTheme,
)
from knots.options.base import BaseRendererOptions


# src/knots/options/html.py
@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering a Knots document to a standalone page.

    Parameters
    ----------
    summary : bool, default True
        Emit the summary panel (table of contents) when the document has at
        least one heading.
    summary_title : str, default "Summary"
        Caption shown above the summary links.
    mermaid_dark_theme : str, default "dark"
        Mermaid theme used when the browser prefers a dark color scheme.
    mermaid_light_theme : str, default "base"
        Mermaid theme used otherwise.
    katex_throw_on_error : bool, default False
        Passed to KaTeX as ``throwOnError``. When False, invalid expressions are
        shown in red instead of aborting the typesetting pass.

    """

    summary: bool = field(
        default=DEFAULT_SUMMARY,
        metadata={"help": "Include the summary panel listing document headings", "importance": "core"},
    )
    summary_title: str = field(
        default=DEFAULT_SUMMARY_TITLE,
        metadata={"help": "Caption of the summary panel", "importance": "advanced"},
    )
    mermaid_dark_theme: MermaidTheme = field(
        default=DEFAULT_MERMAID_DARK_THEME,
        metadata={
            "help": "Mermaid theme for dark color schemes",
            "choices": sorted(MERMAID_THEMES),
            "importance": "advanced",
        },
    )
    mermaid_light_theme: MermaidTheme = field(
        default=DEFAULT_MERMAID_LIGHT_THEME,
        metadata={
            "help": "Mermaid theme for light color schemes",
            "choices": sorted(MERMAID_THEMES),
            "importance": "advanced",
        },
    )
    katex_throw_on_error: bool = field(
        default=DEFAULT_KATEX_THROW_ON_ERROR,
        metadata={"help": "Abort KaTeX typesetting on the first invalid expression", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate field values.

        Raises
        ------
        ValueError
            If the summary title is blank or a Mermaid theme is unknown.

        """
        if not self.summary_title.strip():
            raise ValueError("summary_title must not be empty")

        for name in ("mermaid_dark_theme", "mermaid_light_theme"):
            value = getattr(self, name)
            if value not in MERMAID_THEMES:
                raise ValueError(f"{name} must be one of {sorted(MERMAID_THEMES)}, got {value!r}")
