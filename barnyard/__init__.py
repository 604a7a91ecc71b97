"""Barnyard -- scaffolds a small front-end project from bundled templates.

Pick a markup language (html, jade), a style language (css, less, sass,
scss, styl) and a script language (js, babel, coffee, ts), optionally add a
runtime polyfill and normalize.css, and the scaffolder writes the entry page,
stylesheet and script into the target directory.

Quick usage::

    from barnyard import preflight, scaffold

    state = await preflight("./site")
    files = await scaffold("./site", {"html": {"type": "jade"}, "whitespaceFormatting": 2})
"""

from barnyard.config import ScaffoldConfig, merge_config, resolve_config
from barnyard.errors import (
    BarnyardError,
    ListingError,
    ScaffoldIOError,
    SourceNotFoundError,
    UnsupportedVariantError,
)
from barnyard.preflight import PreflightResult, preflight
from barnyard.scaffold import Scaffolder, scaffold

__all__ = [
    "BarnyardError",
    "ListingError",
    "PreflightResult",
    "ScaffoldConfig",
    "ScaffoldIOError",
    "Scaffolder",
    "SourceNotFoundError",
    "UnsupportedVariantError",
    "merge_config",
    "preflight",
    "resolve_config",
    "scaffold",
]
