"""Jinja2 template access for project scaffolding.

Provides the TemplateRenderer class which loads the bundled templates from
the ``barnyard/templates/`` directory.  Markup templates are rendered with
the scaffold configuration as context; stylesheets, scripts and vendored
assets are read back verbatim.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, TemplateNotFound

from .errors import ScaffoldIOError, SourceNotFoundError


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Reads and renders the bundled scaffold templates.

    Template paths are relative to a configurable template directory and
    use the registry's naming (``index.html``, ``styles/main.scss``).
    Markup is written with tab indentation, so whitespace control is left on
    to keep block tags from leaking blank lines into the output.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    # -- Rendering ---------------------------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"index.jade"``).  Platform separators are accepted.
            context: Dictionary of variables available inside the template.

        Raises:
            SourceNotFoundError: If the template is not bundled.
        """
        try:
            template = self.env.get_template(Path(template_path).as_posix())
        except TemplateNotFound:
            raise SourceNotFoundError(self.template_dir / template_path) from None
        return template.render(**context)

    async def render_async(self, template_path: str, context: dict[str, Any]) -> str:
        """Render *template_path* off the event loop."""
        return await asyncio.to_thread(self.render, template_path, context)

    # -- Raw access --------------------------------------------------------

    def source_path(self, relative_path: str) -> Path:
        """Absolute path of a bundled file."""
        return self.template_dir / relative_path

    async def read_source(self, relative_path: str) -> str:
        """Read a bundled file without rendering it.

        Raises:
            SourceNotFoundError: If the file is not bundled.
            ScaffoldIOError: If the file exists but cannot be read.
        """
        path = self.source_path(relative_path)
        try:
            return await asyncio.to_thread(path.read_text, encoding="utf-8")
        except FileNotFoundError:
            raise SourceNotFoundError(path) from None
        except OSError as exc:
            raise ScaffoldIOError(path, exc.strerror or str(exc)) from exc
