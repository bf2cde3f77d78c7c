#  Copyright (c) 2025 Tom Villani, Ph.D.
"""HTML renderers for Knots documents.

- serializer: tag-stack HTML writer
- html: tree renderer producing body fragments and render state
- document: assembler producing complete pages
"""

from knots.renderers.base import BaseRenderer
from knots.renderers.document import DocumentRenderer
from knots.renderers.html import HtmlRenderer
from knots.renderers.serializer import HtmlSerializer
from knots.renderers.state import FeatureFlags, RenderState, SummaryEntry

__all__ = [
    "BaseRenderer",
    "DocumentRenderer",
    "FeatureFlags",
    "HtmlRenderer",
    "HtmlSerializer",
    "RenderState",
    "SummaryEntry",
]
