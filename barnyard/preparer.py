"""Builds the in-memory files for a scaffold run.

Every artifact (markup, stylesheet, script and the optional vendored assets)
is prepared by its own coroutine.  They run concurrently and the first
failure fails the whole preparation.
"""

from __future__ import annotations

import asyncio
import os
import posixpath
from dataclasses import dataclass
from typing import Any

from .config import ScaffoldConfig
from .registry import NORMALIZE_ASSET, POLYFILL_ASSET, Group, resolve, variant_for
from .templates import TemplateRenderer


@dataclass(frozen=True)
class PendingFile:
    """A file waiting to be written, relative to the project directory."""

    content: str
    destination: str


def detab(content: str, width: int | None) -> str:
    """Replace tabs with *width* spaces per tab stop.

    A leading run of ``k`` tabs becomes ``k * width`` spaces.  ``None`` leaves
    the content untouched.
    """
    if width is None:
        return content
    return content.expandtabs(width)


class FilePreparer:
    """Resolves, reads and transforms every artifact of a scaffold run."""

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    async def prepare(self, config: ScaffoldConfig) -> list[PendingFile]:
        """Return the pending files for *config*.

        Order: markup, styles, scripts, then polyfill and normalize when
        requested.

        Raises:
            UnsupportedVariantError: Before any read, if a ``type`` is unknown.
            SourceNotFoundError: If a bundled template is missing.
        """
        for group in Group:
            variant_for(group, getattr(config, group.value).type)

        tasks = [
            self._prepare_markup(config),
            self._prepare_copy(config, Group.STYLES),
            self._prepare_copy(config, Group.SCRIPTS),
        ]
        if config.include_polyfill:
            tasks.append(
                self._prepare_asset(config, POLYFILL_ASSET, config.scripts.folder)
            )
        if config.include_normalize_css:
            tasks.append(
                self._prepare_asset(config, NORMALIZE_ASSET, config.styles.folder)
            )
        return list(await asyncio.gather(*tasks))

    # -- Artifacts ---------------------------------------------------------

    async def _prepare_markup(self, config: ScaffoldConfig) -> PendingFile:
        html = config.html
        source = resolve(Group.HTML, html.type)
        destination = resolve(Group.HTML, html.type, html.file)
        content = await self.renderer.render_async(source, build_context(config))
        return PendingFile(detab(content, config.indent_width), destination)

    async def _prepare_copy(self, config: ScaffoldConfig, group: Group) -> PendingFile:
        settings = getattr(config, group.value)
        source = resolve(group, settings.type)
        destination = resolve(group, settings.type, settings.file, settings.folder)
        content = await self.renderer.read_source(source)
        return PendingFile(detab(content, config.indent_width), destination)

    async def _prepare_asset(
        self, config: ScaffoldConfig, asset: tuple[str, str], folder: str
    ) -> PendingFile:
        source, filename = asset
        content = await self.renderer.read_source(source)
        return PendingFile(
            detab(content, config.indent_width), os.path.join(folder, filename)
        )


# ---------------------------------------------------------------------------
# Render context
# ---------------------------------------------------------------------------


def build_context(config: ScaffoldConfig) -> dict[str, Any]:
    """Template context for the markup entry point.

    Exposes the whole configuration plus ``links``: the URLs the page should
    load.  Preprocessor languages are linked by their compiled ``.css`` and
    ``.js`` names.
    """
    styles = config.styles
    scripts = config.scripts
    context = config.model_dump()
    context["links"] = {
        "stylesheet": posixpath.join(styles.folder, f"{styles.file}.css"),
        "script": posixpath.join(scripts.folder, f"{scripts.file}.js"),
        "polyfill": (
            posixpath.join(scripts.folder, POLYFILL_ASSET[1])
            if config.include_polyfill
            else None
        ),
        "normalize": (
            posixpath.join(styles.folder, NORMALIZE_ASSET[1])
            if config.include_normalize_css
            else None
        ),
    }
    return context
