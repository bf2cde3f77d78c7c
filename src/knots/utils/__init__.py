#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers for knots."""

from knots.utils.html_utils import escape_html, escape_script_string, is_dangerous_url, sanitize_url

__all__ = ["escape_html", "escape_script_string", "is_dangerous_url", "sanitize_url"]
