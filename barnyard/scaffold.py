"""Main scaffolding orchestrator.

Resolves the configuration, prepares every artifact concurrently, then
writes them all concurrently into the target directory.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .config import ScaffoldConfig, resolve_config
from .errors import BarnyardError
from .preflight import preflight
from .preparer import FilePreparer
from .templates import TemplateRenderer
from .utils import (
    print_error,
    print_success,
    print_summary_table,
    print_warning,
    print_written_files,
)
from .writer import write_files


class Scaffolder:
    """Scaffolds a front-end project from the bundled templates.

    The scaffolder holds no state between runs; one instance can generate
    any number of projects.  With ``verbose=True`` progress is reported on
    the shared Rich console.
    """

    def __init__(
        self,
        config: ScaffoldConfig | Mapping[str, Any] | None = None,
        renderer: TemplateRenderer | None = None,
        *,
        verbose: bool = False,
    ) -> None:
        self.config = resolve_config(config)
        self.renderer = renderer or TemplateRenderer()
        self.preparer = FilePreparer(self.renderer)
        self.verbose = verbose

    # -- Public API --------------------------------------------------------

    async def generate(self, project_dir: str | Path) -> list[Path]:
        """Scaffold the project into *project_dir*.

        Returns:
            Absolute :class:`pathlib.Path` objects for the files written,
            in the order markup, styles, scripts, polyfill, normalize.

        Raises:
            BarnyardError: On the first failure.  Files written before the
                failure are not removed.
        """
        root = Path(project_dir).absolute()
        if self.verbose:
            await self._report_target(root)

        try:
            pending = await self.preparer.prepare(self.config)
            written = await write_files(root, pending)
        except BarnyardError as exc:
            if self.verbose:
                print_error(f"Scaffolding failed: {exc}")
            raise

        if self.verbose:
            print_written_files(root, written)
            print_success(f"Scaffolded {len(written)} files into {root}")
        return written

    # -- Reporting ---------------------------------------------------------

    async def _report_target(self, root: Path) -> None:
        state = await preflight(root)
        if not state.empty:
            print_warning(
                f"Target already contains {state.file_count} entries, "
                f"existing files may be overwritten: {root}"
            )
        config = self.config
        print_summary_table(
            {
                "Markup": config.html.type,
                "Styles": config.styles.type,
                "Scripts": config.scripts.type,
                "Polyfill": "yes" if config.include_polyfill else "no",
                "normalize.css": "yes" if config.include_normalize_css else "no",
                "Whitespace": str(config.whitespace_formatting),
            },
            title="Barnyard scaffold",
        )


async def scaffold(
    project_dir: str | Path,
    config: ScaffoldConfig | Mapping[str, Any] | None = None,
    *,
    verbose: bool = False,
) -> list[Path]:
    """Scaffold a project into *project_dir* and return the files written.

    The written files come back as absolute :class:`pathlib.Path` objects,
    not strings; use ``str(path)`` or ``path.as_posix()`` where text is
    needed.

    Quick usage::

        files = await scaffold("./site", {"styles": {"type": "scss"}})
        names = [str(path) for path in files]
    """
    return await Scaffolder(config, verbose=verbose).generate(project_dir)
