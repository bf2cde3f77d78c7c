#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/knots/renderers/base.py
"""Base class for knots renderers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from knots.exceptions import InvalidOptionsError
from knots.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for renderers producing HTML text.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Renderer options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, node: Any) -> str:
        """Render the input to an HTML string.

        Raises
        ------
        RenderingError
            If rendering fails

        """
        pass

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
