"""Writes prepared files into the project directory."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from pathlib import Path

from .errors import ScaffoldIOError
from .preparer import PendingFile


async def write_files(
    project_dir: str | Path, pending: Sequence[PendingFile]
) -> list[Path]:
    """Write every pending file below *project_dir*.

    Parent directories are created as needed and existing files are
    overwritten.  Writes run concurrently; the returned absolute paths follow
    the order of *pending*.  The first failure is raised and files already
    written stay on disk.  Every destination is checked before anything is
    written, so a destination outside *project_dir* writes nothing.

    Raises:
        ScaffoldIOError: If a destination lies outside *project_dir*, or a
            directory cannot be created or a file written.
    """
    root = Path(project_dir).absolute()
    targets = [_target(root, file.destination) for file in pending]
    return list(
        await asyncio.gather(
            *(_write_one(path, file.content) for path, file in zip(targets, pending))
        )
    )


def _target(root: Path, destination: str) -> Path:
    path = root / destination
    if not path.resolve().is_relative_to(root.resolve()):
        raise ScaffoldIOError(path, f"destination escapes the project directory {root}")
    return path


async def _write_one(path: Path, content: str) -> Path:
    try:
        await asyncio.to_thread(_write_file, path, content)
    except OSError as exc:
        raise ScaffoldIOError(path, exc.strerror or str(exc)) from exc
    return path


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
