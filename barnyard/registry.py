"""Template registry: maps language choices to template and output paths.

Each group (markup, styles, scripts) has a closed set of variants.  A
variant resolves to a :class:`TemplateEntry` which turns a base name and an
optional folder into a relative path.  Called without a base name the entry
yields the canonical source filename of the bundled template; called with the
user's names it yields the destination filename.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum

from .errors import UnsupportedVariantError


# ---------------------------------------------------------------------------
# Groups and variants
# ---------------------------------------------------------------------------


class Group(str, Enum):
    """Asset groups a scaffolded project is made of."""

    HTML = "html"
    STYLES = "styles"
    SCRIPTS = "scripts"


class MarkupType(str, Enum):
    HTML = "html"
    JADE = "jade"


class StyleType(str, Enum):
    CSS = "css"
    LESS = "less"
    SASS = "sass"
    SCSS = "scss"
    STYL = "styl"

    @classmethod
    def _missing_(cls, value: object) -> "StyleType | None":
        if value == "stylus":
            return cls.STYL
        return None


class ScriptType(str, Enum):
    JS = "js"
    BABEL = "babel"
    COFFEE = "coffee"
    TS = "ts"

    @classmethod
    def _missing_(cls, value: object) -> "ScriptType | None":
        return _SCRIPT_ALIASES.get(value)  # type: ignore[arg-type]


_SCRIPT_ALIASES: dict[str, ScriptType] = {
    "es6": ScriptType.BABEL,
    "coffeescript": ScriptType.COFFEE,
    "typescript": ScriptType.TS,
}

_VARIANT_ENUMS: dict[Group, type[Enum]] = {
    Group.HTML: MarkupType,
    Group.STYLES: StyleType,
    Group.SCRIPTS: ScriptType,
}


# ---------------------------------------------------------------------------
# Registry entries
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TemplateEntry:
    """Naming rule for one variant of one group."""

    extension: str
    default_name: str
    default_folder: str | None = None

    def __call__(self, base_name: str | None = None, folder: str | None = None) -> str:
        filename = f"{base_name or self.default_name}{self.extension}"
        if self.default_folder is None:
            return filename
        return os.path.join(folder or self.default_folder, filename)


def _markup(extension: str) -> TemplateEntry:
    return TemplateEntry(extension, "index")


def _style(extension: str) -> TemplateEntry:
    return TemplateEntry(extension, "main", "styles")


def _script(extension: str) -> TemplateEntry:
    return TemplateEntry(extension, "main", "scripts")


REGISTRY: dict[Group, dict[Enum, TemplateEntry]] = {
    Group.HTML: {
        MarkupType.HTML: _markup(".html"),
        MarkupType.JADE: _markup(".jade"),
    },
    Group.STYLES: {
        StyleType.CSS: _style(".css"),
        StyleType.LESS: _style(".less"),
        StyleType.SASS: _style(".sass"),
        StyleType.SCSS: _style(".scss"),
        StyleType.STYL: _style(".styl"),
    },
    Group.SCRIPTS: {
        ScriptType.JS: _script(".js"),
        ScriptType.BABEL: _script(".babel.js"),
        ScriptType.COFFEE: _script(".coffee"),
        ScriptType.TS: _script(".ts"),
    },
}

# Vendored assets copied verbatim: (source relative to the template dir, output filename)
POLYFILL_ASSET = ("vendor/polyfill.js", "polyfill.js")
NORMALIZE_ASSET = ("vendor/normalize.css", "normalize.css")


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


def supported_variants(group: Group | str) -> list[str]:
    """Return the registered variant keys for *group*."""
    return [member.value for member in REGISTRY[Group(group)]]


def variant_for(group: Group | str, variant: str | Enum) -> Enum:
    """Convert a raw ``type`` value into the group's variant enum.

    Raises:
        UnsupportedVariantError: If *variant* is not registered for *group*.
    """
    group = Group(group)
    enum_cls = _VARIANT_ENUMS[group]
    if isinstance(variant, enum_cls):
        return variant
    try:
        return enum_cls(variant)
    except ValueError:
        raise UnsupportedVariantError(
            group.value, str(variant), supported_variants(group)
        ) from None


def resolve(
    group: Group | str,
    variant: str | Enum,
    base_name: str | None = None,
    folder: str | None = None,
) -> str:
    """Resolve a relative template path for *variant* in *group*.

    Args:
        group: ``"html"``, ``"styles"`` or ``"scripts"``.
        variant: A registered ``type`` key such as ``"scss"``.
        base_name: File name without extension.  Omit to get the bundled
            template's own filename.
        folder: Output folder for styles and scripts.  Ignored for markup.

    Returns:
        The relative path, joined with the platform separator.
    """
    group = Group(group)
    entry = REGISTRY[group][variant_for(group, variant)]
    return entry(base_name, folder)
