#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderer configuration options."""

from knots.options.base import BaseRendererOptions, CloneFrozenMixin
from knots.options.html import HtmlRendererOptions

__all__ = ["BaseRendererOptions", "CloneFrozenMixin", "HtmlRendererOptions"]
