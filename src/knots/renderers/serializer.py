#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/knots/renderers/serializer.py
"""Stack-based HTML serializer.

:class:`HtmlSerializer` writes HTML through a small set of primitives and
keeps a stack of open elements, so that every opened tag is closed exactly
once, in LIFO order. Unbalanced use raises :class:`~knots.exceptions.TagStackError`
instead of producing malformed markup.

Two write paths exist:

- ``write_content`` escapes text. Everything that comes from the document
  (titles, author names, body text) goes through it.
- ``write_raw`` writes trusted text verbatim: compiled-in assets, fragments
  produced by another serializer, and generated script whose document-derived
  parts were already escaped for their context.

Examples
--------
    >>> s = HtmlSerializer()
    >>> s.start_tag("p", [("class", "note")])
    >>> s.write_content("1 < 2")
    >>> s.end_tag()
    >>> s.into_result()
    '<p class="note">1 &lt; 2</p>'

"""

from __future__ import annotations

from typing import Iterable, Tuple

from knots.exceptions import SerializerFinalizedError, TagStackError
from knots.utils.html_utils import escape_html

Attributes = Iterable[Tuple[str, str]]


class HtmlSerializer:
    """Accumulate HTML output while tracking open elements.

    A serializer is owned by a single render call. It is not thread-safe and
    cannot be reused after :meth:`into_result`.
    """

    def __init__(self) -> None:
        """Create an empty serializer."""
        self._output: list[str] = []
        self._tag_stack: list[str] = []
        self._finalized = False

    @property
    def depth(self) -> int:
        """Number of elements currently open."""
        return len(self._tag_stack)

    @property
    def open_tags(self) -> tuple[str, ...]:
        """Currently open elements, outermost first."""
        return tuple(self._tag_stack)

    def start_tag(self, name: str, attrs: Attributes = ()) -> None:
        """Write an opening tag and push it on the stack.

        Parameters
        ----------
        name : str
            Element name
        attrs : iterable of (str, str)
            Attribute name/value pairs, written in order; values are escaped

        """
        self._check_open()
        self._output.append(self._format_tag(name, attrs))
        self._tag_stack.append(name)

    def end_tag(self) -> None:
        """Close the most recently opened element.

        Raises
        ------
        TagStackError
            If no element is open

        """
        self._check_open()
        if not self._tag_stack:
            raise TagStackError("end_tag() called with no open tag: every end_tag needs a matching start_tag")
        name = self._tag_stack.pop()
        self._output.append(f"</{name}>")

    def orphan_tag(self, name: str, attrs: Attributes = ()) -> None:
        """Write a void element such as ``meta``, ``hr`` or ``!DOCTYPE html``.

        The stack is not touched.
        """
        self._check_open()
        self._output.append(self._format_tag(name, attrs))

    def inline_tag(self, name: str, attrs: Attributes, content: str) -> None:
        """Write ``<name attrs>`` + escaped ``content`` + ``</name>``."""
        self.start_tag(name, attrs)
        self.write_content(content)
        self.end_tag()

    def write_content(self, text: str) -> None:
        """Append text with HTML-significant characters escaped."""
        self._check_open()
        self._output.append(escape_html(text))

    def write_raw(self, text: str) -> None:
        """Append trusted text verbatim. Never pass document text here."""
        self._check_open()
        self._output.append(text)

    def into_result(self) -> str:
        """Finalize the serializer and return the accumulated HTML.

        Returns
        -------
        str
            The serialized markup

        Raises
        ------
        TagStackError
            If elements are still open
        SerializerFinalizedError
            If the serializer was already finalized

        """
        self._check_open()
        if self._tag_stack:
            unclosed = ", ".join(f"<{name}>" for name in self._tag_stack)
            raise TagStackError(
                f"Cannot finalize HTML with {len(self._tag_stack)} unclosed tag(s): {unclosed}",
                open_tags=self.open_tags,
            )
        self._finalized = True
        return "".join(self._output)

    def _check_open(self) -> None:
        if self._finalized:
            raise SerializerFinalizedError("HtmlSerializer was already finalized by into_result()")

    @staticmethod
    def _format_tag(name: str, attrs: Attributes) -> str:
        parts = [name]
        parts.extend(f'{key}="{escape_html(value)}"' for key, value in attrs)
        return f"<{' '.join(parts)}>"


__all__ = ["HtmlSerializer", "Attributes"]
