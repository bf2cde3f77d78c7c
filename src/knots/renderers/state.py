#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/knots/renderers/state.py
"""Accumulators filled while rendering a document tree.

A :class:`RenderState` is created for each render call. The tree renderer
writes to it during traversal; the document renderer only reads it afterwards
to build the summary panel and the feature trailer blocks.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SummaryEntry:
    """One table of contents line.

    Parameters
    ----------
    level : int
        Heading level
    anchor : str
        Fragment identifier of the heading
    name : str
        Heading text shown in the summary

    """

    level: int
    anchor: str
    name: str


@dataclass
class FeatureFlags:
    """Client-side features required by the rendered content.

    Flags only ever change from False to True.
    """

    katex: bool = False
    prism: bool = False
    mermaid: bool = False

    def any(self) -> bool:
        """Return True if at least one feature is required."""
        return self.katex or self.prism or self.mermaid


@dataclass
class RenderState:
    """Per-render accumulators.

    Parameters
    ----------
    summary : list of SummaryEntry
        Headings in document order
    features : FeatureFlags
        Features detected so far
    prism_plugins : list of str
        Canonical code languages in first-seen order, without duplicates
    katex_buffer : list of str
        One KaTeX initialization statement per math expression
    math_count : int
        Number of math expressions rendered, used for placeholder ids

    """

    summary: list[SummaryEntry] = field(default_factory=list)
    features: FeatureFlags = field(default_factory=FeatureFlags)
    prism_plugins: list[str] = field(default_factory=list)
    katex_buffer: list[str] = field(default_factory=list)
    math_count: int = 0

    def add_summary_entry(self, level: int, anchor: str, name: str) -> None:
        self.summary.append(SummaryEntry(level=level, anchor=anchor, name=name))

    def register_prism_language(self, language: str) -> bool:
        """Mark Prism as required and record ``language`` if it is new.

        Returns
        -------
        bool
            True if the language was not seen before

        """
        self.features.prism = True
        if not language or language in self.prism_plugins:
            return False
        self.prism_plugins.append(language)
        return True

    def register_math(self, statement: str) -> None:
        """Mark KaTeX as required and buffer one initialization statement."""
        self.features.katex = True
        self.katex_buffer.append(statement)

    def next_math_id(self) -> int:
        """Reserve the next math expression number."""
        self.math_count += 1
        return self.math_count

    def register_diagram(self) -> None:
        self.features.mermaid = True

    @property
    def katex_content(self) -> str:
        """All buffered KaTeX statements, one per line."""
        return "".join(f"{statement}\n" for statement in self.katex_buffer)


__all__ = ["FeatureFlags", "RenderState", "SummaryEntry"]
