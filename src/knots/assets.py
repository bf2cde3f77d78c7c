#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/knots/assets.py
"""Compiled-in stylesheets, scripts and icons embedded in rendered pages.

Every asset is read from the package's ``static`` directory exactly once, when
this module is imported. Rendering only reads the in-memory catalogue, so it
performs no I/O. The asset text is trusted and is written to pages verbatim.

Layout of ``static/``::

    css/normalize.css, css/style.css     base stylesheets (always included)
    css/katex.css,  js/katex.js          math typesetting
    css/prism.css,  js/prism.js          code highlighting core
    js/prism/prism-<language>.js         per-language Prism grammars
    js/mermaid.js                        diagram rendering
    icons/profile.svg, icons/ereader.svg author and license icons

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from knots.exceptions import MissingAssetError

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"

PRISM_PLUGIN_PREFIX = "prism-"

# Vendor library assets. Source checkouts ship comment-only placeholders for
# these; release builds replace them with the minified upstream files.
RUNTIME_ASSETS = ("katex_css", "katex_js", "prism_js", "mermaid_js")

# Names authors commonly put on code fences, mapped to the Prism grammar name.
PRISM_LANGUAGE_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "py": "python",
        "python3": "python",
        "rs": "rust",
        "sh": "bash",
        "shell": "bash",
        "zsh": "bash",
        "js": "javascript",
        "mjs": "javascript",
        "yml": "yaml",
        "h": "c",
    }
)


def canonical_language(language: str) -> str:
    """Normalize a code fence language to its Prism grammar name.

    Parameters
    ----------
    language : str
        Language as written by the author, e.g. ``"Py"``

    Returns
    -------
    str
        Lowercased language with aliases resolved; empty if ``language`` is blank

    """
    normalized = language.strip().lower()
    return PRISM_LANGUAGE_ALIASES.get(normalized, normalized)


def is_placeholder(text: str) -> bool:
    """Return True if a stylesheet or script consists of a single comment."""
    stripped = text.strip()
    return stripped.startswith("/*") and stripped.endswith("*/") and stripped.count("*/") == 1


@dataclass(frozen=True)
class AssetCatalogue:
    """Immutable set of page assets.

    Parameters
    ----------
    normalize_css, style_css : str
        Base stylesheets included in every page
    katex_css, katex_js : str
        KaTeX stylesheet and runtime
    prism_css, prism_js : str
        Prism theme and core runtime
    mermaid_js : str
        Mermaid runtime
    author_icon, license_icon : str
        Inline SVG icons
    prism_plugins : Mapping[str, str]
        Prism grammar scripts keyed by canonical language name

    """

    normalize_css: str
    style_css: str
    katex_css: str
    katex_js: str
    prism_css: str
    prism_js: str
    mermaid_js: str
    author_icon: str
    license_icon: str
    prism_plugins: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def prism_plugin(self, language: str) -> Optional[str]:
        """Return the Prism grammar script for a language, or None if not bundled."""
        return self.prism_plugins.get(canonical_language(language))

    @property
    def prism_languages(self) -> tuple[str, ...]:
        """Canonical names of all bundled Prism grammars, sorted."""
        return tuple(sorted(self.prism_plugins))

    @property
    def placeholder_runtimes(self) -> tuple[str, ...]:
        """Names of vendor runtime assets that hold only a comment banner.

        Pages using a feature whose runtime is listed here render their
        markup but are not typeset, highlighted or drawn in the browser.
        """
        return tuple(name for name in RUNTIME_ASSETS if is_placeholder(getattr(self, name)))


def load_catalogue(static_dir: Path = STATIC_DIR) -> AssetCatalogue:
    """Read every asset under ``static_dir`` into an :class:`AssetCatalogue`.

    Parameters
    ----------
    static_dir : Path
        Directory laid out as described in the module docstring

    Returns
    -------
    AssetCatalogue
        Loaded catalogue

    Raises
    ------
    MissingAssetError
        If a required asset is missing from the installation

    """

    def read(relative: str) -> str:
        try:
            return (static_dir / relative).read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise MissingAssetError(f"Asset {relative} not found in {static_dir}", relative) from exc

    plugins: dict[str, str] = {}
    plugin_dir = static_dir / "js" / "prism"
    if plugin_dir.is_dir():
        for path in sorted(plugin_dir.glob(f"{PRISM_PLUGIN_PREFIX}*.js")):
            language = path.stem[len(PRISM_PLUGIN_PREFIX) :]
            plugins[language] = path.read_text(encoding="utf-8")

    catalogue = AssetCatalogue(
        normalize_css=read("css/normalize.css"),
        style_css=read("css/style.css"),
        katex_css=read("css/katex.css"),
        katex_js=read("js/katex.js"),
        prism_css=read("css/prism.css"),
        prism_js=read("js/prism.js"),
        mermaid_js=read("js/mermaid.js"),
        author_icon=read("icons/profile.svg"),
        license_icon=read("icons/ereader.svg"),
        prism_plugins=MappingProxyType(plugins),
    )
    logger.debug("Loaded assets from %s with Prism grammars: %s", static_dir, ", ".join(catalogue.prism_languages))
    if catalogue.placeholder_runtimes:
        logger.debug("Placeholder runtimes in %s: %s", static_dir, ", ".join(catalogue.placeholder_runtimes))
    return catalogue


ASSETS: AssetCatalogue = load_catalogue()

__all__ = [
    "ASSETS",
    "AssetCatalogue",
    "PRISM_LANGUAGE_ALIASES",
    "RUNTIME_ASSETS",
    "STATIC_DIR",
    "canonical_language",
    "is_placeholder",
    "load_catalogue",
]
