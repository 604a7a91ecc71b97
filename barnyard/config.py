"""Scaffold configuration.

Typed configuration for a single scaffold run.  User input is deep-merged
over the defaults: nested groups are merged field by field, so supplying only
``styles.type`` keeps ``styles.file`` and ``styles.folder`` at their defaults.
The ``type`` fields are plain strings here; the template registry rejects
unknown values before any file is touched.
"""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_snake


WHITESPACE_TABS = "tabs"


class HtmlConfig(BaseModel):
    """Markup entry point."""

    file: str = Field(default="index", description="Base name without extension")
    type: str = Field(default="html", description="Markup language: html or jade")


class StylesConfig(BaseModel):
    """Main stylesheet."""

    folder: str = Field(default="styles")
    file: str = Field(default="main")
    type: str = Field(default="css", description="css, less, sass, scss or styl")


class ScriptsConfig(BaseModel):
    """Main script."""

    folder: str = Field(default="scripts")
    file: str = Field(default="main")
    type: str = Field(default="js", description="js, babel, coffee or ts")


class ScaffoldConfig(BaseModel):
    """Full configuration for one scaffold run."""

    html: HtmlConfig = Field(default_factory=HtmlConfig)
    styles: StylesConfig = Field(default_factory=StylesConfig)
    scripts: ScriptsConfig = Field(default_factory=ScriptsConfig)
    include_polyfill: bool = Field(default=False)
    include_normalize_css: bool = Field(default=False)
    whitespace_formatting: int | str | None = Field(
        default=WHITESPACE_TABS,
        description='"tabs" to keep tab indentation, or the number of spaces per tab',
    )

    @field_validator("whitespace_formatting")
    @classmethod
    def _positive_width(cls, value: int | str | None) -> int | str | None:
        width = _parse_width(value)
        if width is not None and width < 1:
            raise ValueError("whitespace_formatting must be a positive number of spaces")
        return value

    @property
    def indent_width(self) -> int | None:
        """Spaces per tab, or ``None`` when tabs are kept as-is."""
        return _parse_width(self.whitespace_formatting)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: str | Path) -> Path:
        """Persist the configuration to a JSON file."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: str | Path) -> "ScaffoldConfig":
        """Load a configuration previously written by :meth:`save`.

        Missing fields, nested ones included, take their defaults.
        """
        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a configuration from environment variables.

        Recognised variables (all optional):
            BARNYARD_HTML, BARNYARD_STYLES, BARNYARD_SCRIPTS,
            BARNYARD_POLYFILL, BARNYARD_NORMALIZE_CSS, BARNYARD_WHITESPACE.
        """
        overrides: dict[str, Any] = {}
        for group in ("html", "styles", "scripts"):
            value = os.environ.get(f"BARNYARD_{group.upper()}")
            if value:
                overrides[group] = {"type": value}
        if os.environ.get("BARNYARD_POLYFILL"):
            overrides["include_polyfill"] = _env_flag(os.environ["BARNYARD_POLYFILL"])
        if os.environ.get("BARNYARD_NORMALIZE_CSS"):
            overrides["include_normalize_css"] = _env_flag(os.environ["BARNYARD_NORMALIZE_CSS"])
        if os.environ.get("BARNYARD_WHITESPACE"):
            overrides["whitespace_formatting"] = os.environ["BARNYARD_WHITESPACE"]
        return resolve_config(overrides)


DEFAULT_CONFIG = ScaffoldConfig()


# ---------------------------------------------------------------------------
# Merging
# ---------------------------------------------------------------------------


def merge_config(
    base: ScaffoldConfig, overrides: Mapping[str, Any] | None
) -> ScaffoldConfig:
    """Deep-merge *overrides* over *base* and return a new configuration.

    Nested mappings are merged key by key; every other value replaces the
    base value wholesale.  camelCase keys (``includePolyfill``) are accepted
    alongside snake_case ones.
    """
    if not overrides:
        return base.model_copy(deep=True)
    merged = _deep_merge(base.model_dump(), _normalise_keys(overrides))
    return ScaffoldConfig.model_validate(merged)


def resolve_config(
    user_config: ScaffoldConfig | Mapping[str, Any] | None = None,
) -> ScaffoldConfig:
    """Return a fully-populated configuration for *user_config*."""
    if isinstance(user_config, ScaffoldConfig):
        return user_config
    return merge_config(DEFAULT_CONFIG, user_config)


def _normalise_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, Mapping):
            value = _normalise_keys(value)
        result[to_snake(key)] = value
    return result


def _deep_merge(base: dict[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def _parse_width(value: int | str | None) -> int | None:
    """Integer width from an int or numeric string such as ``" -2 "``."""
    if isinstance(value, int):
        return value
    if isinstance(value, str) and re.fullmatch(r"[+-]?\d+", value.strip()):
        return int(value.strip())
    return None


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")
