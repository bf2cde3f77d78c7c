"""Base classes for renderer options.

This module defines the foundation classes for the knots renderer options.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from knots.constants import DEFAULT_FAIL_ON_MISSING_PLUGIN


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        Raises
        ------
        TypeError
            If a keyword does not name a field

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options.

    Parameters
    ----------
    fail_on_missing_plugin : bool, default=False
        Whether to raise MissingAssetError when a code block's language has no
        compiled-in Prism plugin. If False (default), a warning is logged and
        the block is emitted without a language grammar.

    """

    fail_on_missing_plugin: bool = field(
        default=DEFAULT_FAIL_ON_MISSING_PLUGIN,
        metadata={
            "help": "Raise MissingAssetError when a code language has no Prism plugin instead of logging a warning",
            "importance": "advanced",
        },
    )
