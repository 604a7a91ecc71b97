"""Shared pytest fixtures for the Barnyard test suite.

Provides reusable fixtures for:
- Temporary project directories
- A throwaway template directory for renderer/preparer tests
"""

from __future__ import annotations

from pathlib import Path

import pytest


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Target directory for a scaffold run (not created up front)."""
    yield tmp_path / "site"


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """Minimal template tree mirroring the bundled layout."""
    root = tmp_path / "templates"
    (root / "styles").mkdir(parents=True)
    (root / "scripts").mkdir()
    (root / "vendor").mkdir()

    (root / "index.html").write_text(
        "<html>\n"
        "\t<link href=\"{{ links.stylesheet }}\">\n"
        "\t{% if links.polyfill %}\n"
        "\t<script src=\"{{ links.polyfill }}\"></script>\n"
        "\t{% endif %}\n"
        "\t<script src=\"{{ links.script }}\"></script>\n"
        "</html>\n",
        encoding="utf-8",
    )
    (root / "styles" / "main.css").write_text("body {\n\tmargin: 0;\n}\n", encoding="utf-8")
    (root / "scripts" / "main.js").write_text("if (x) {\n\t\ty();\n}\n", encoding="utf-8")
    (root / "vendor" / "polyfill.js").write_text("/* polyfill */\n", encoding="utf-8")
    (root / "vendor" / "normalize.css").write_text("/* normalize */\n", encoding="utf-8")
    yield root
