"""Read-only inspection of a scaffold target directory."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

from pydantic import BaseModel, Field, computed_field

from .errors import ListingError


class PreflightResult(BaseModel):
    """State of a target directory before scaffolding."""

    exists: bool
    file_count: int = Field(default=0, ge=0)

    @computed_field  # type: ignore[misc]
    @property
    def empty(self) -> bool:
        """True when nothing would be overwritten or mixed in."""
        return self.file_count == 0


async def preflight(project_dir: str | Path) -> PreflightResult:
    """Report whether *project_dir* exists and how many entries it holds.

    A missing directory counts as empty since scaffolding creates it.

    Raises:
        ListingError: If the path exists but cannot be listed (permission
            denied, not a directory, ...).
    """
    path = Path(project_dir)
    try:
        entries = await asyncio.to_thread(os.listdir, path)
    except FileNotFoundError:
        return PreflightResult(exists=False)
    except OSError as exc:
        raise ListingError(path, exc.strerror or str(exc)) from exc
    return PreflightResult(exists=True, file_count=len(entries))
