#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/knots/utils/html_utils.py
"""Escaping helpers shared by the HTML serializer and renderers."""

from __future__ import annotations

import json
import logging
import re
from html import escape as _html_escape

from knots.constants import DANGEROUS_SCHEMES, NEUTRALIZED_HREF

logger = logging.getLogger(__name__)

# Characters that could end a <script> element or open an HTML comment when a
# JSON string literal is embedded in inline script text.
_SCRIPT_UNSAFE = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
}

# Browsers drop C0 controls and spaces, and ignore whitespace inside a scheme.
_URL_IGNORED_CHARS = re.compile(r"[\x00-\x20\x7f]|\s")


def escape_html(text: str) -> str:
    """Escape ``&``, ``<``, ``>`` and both quote characters."""
    return _html_escape(text, quote=True)


def escape_script_string(text: str) -> str:
    """Encode text as a JavaScript string literal safe inside ``<script>``.

    The result includes the surrounding double quotes. Non-ASCII characters
    (including U+2028/U+2029) are escaped by ``json.dumps``, and the HTML
    significant characters are replaced with unicode escapes so the literal
    can never close the enclosing script element.

    Parameters
    ----------
    text : str
        Arbitrary text, typically document-derived

    Returns
    -------
    str
        Quoted JavaScript string literal

    Examples
    --------
    >>> escape_script_string("</script>")
    '"\\\\u003c/script\\\\u003e"'

    """
    encoded = json.dumps(text, ensure_ascii=True)
    for char, replacement in _SCRIPT_UNSAFE.items():
        encoded = encoded.replace(char, replacement)
    return encoded


def is_dangerous_url(url: str) -> bool:
    """Return True if the URL uses a scheme that can execute script."""
    normalized = _URL_IGNORED_CHARS.sub("", url).lower()
    return normalized.startswith(DANGEROUS_SCHEMES)


def sanitize_url(url: str) -> str:
    """Return the URL unchanged unless its scheme is dangerous.

    Dangerous URLs are replaced with ``"#"``. The returned value still needs
    attribute escaping, which the serializer performs.
    """
    if is_dangerous_url(url):
        logger.warning("Neutralized link with unsafe scheme: %.40r", url)
        return NEUTRALIZED_HREF
    return url
