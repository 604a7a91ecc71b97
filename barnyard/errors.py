"""Exceptions raised by the Barnyard scaffolder.

Every failure surfaces to the caller of the coroutine that hit it.  Nothing
is retried and files already written are left in place.
"""

from __future__ import annotations

from pathlib import Path


class BarnyardError(Exception):
    """Base class for all scaffolding failures."""


class UnsupportedVariantError(BarnyardError, ValueError):
    """Raised when a ``type`` value is not registered for its group."""

    def __init__(self, group: str, variant: str, supported: list[str] | None = None) -> None:
        self.group = group
        self.variant = variant
        self.supported = supported or []
        message = f"Unsupported {group} type: {variant!r}"
        if self.supported:
            message += f" (expected one of: {', '.join(self.supported)})"
        super().__init__(message)


class SourceNotFoundError(BarnyardError):
    """A bundled template or asset is missing from the installation."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Template source not found: {self.path}")


class ScaffoldIOError(BarnyardError):
    """Reading, writing or creating directories failed."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{self.path}: {message}")


class ListingError(BarnyardError):
    """The preflight check could not list the target directory."""

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot list {self.path}: {message}")
