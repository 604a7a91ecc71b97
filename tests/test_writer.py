"""Tests for the file writer (barnyard.writer)."""

from __future__ import annotations

import os
import time
from pathlib import Path
from unittest.mock import patch

import pytest

from barnyard.errors import ScaffoldIOError
from barnyard.preparer import PendingFile
from barnyard.writer import write_files

pytestmark = pytest.mark.unit


class TestWriteFiles:
    @pytest.mark.asyncio
    async def test_creates_parent_directories(self, tmp_project_dir: Path):
        pending = [
            PendingFile("<html></html>", "index.html"),
            PendingFile("body {}", os.path.join("assets", "css", "main.css")),
        ]
        written = await write_files(tmp_project_dir, pending)
        assert written == [
            tmp_project_dir.absolute() / "index.html",
            tmp_project_dir.absolute() / "assets" / "css" / "main.css",
        ]
        assert (tmp_project_dir / "assets" / "css" / "main.css").read_text(encoding="utf-8") == "body {}"

    @pytest.mark.asyncio
    async def test_returns_absolute_paths_in_input_order(self, tmp_project_dir: Path):
        names = [f"file{i}.txt" for i in range(10)]
        written = await write_files(tmp_project_dir, [PendingFile(n, n) for n in names])
        assert [p.name for p in written] == names
        assert all(p.is_absolute() for p in written)

    @pytest.mark.asyncio
    async def test_overwrites_existing_files(self, tmp_project_dir: Path):
        tmp_project_dir.mkdir()
        (tmp_project_dir / "index.html").write_text("old", encoding="utf-8")
        await write_files(tmp_project_dir, [PendingFile("new", "index.html")])
        assert (tmp_project_dir / "index.html").read_text(encoding="utf-8") == "new"

    @pytest.mark.asyncio
    async def test_existing_directories_are_fine(self, tmp_project_dir: Path):
        (tmp_project_dir / "styles").mkdir(parents=True)
        written = await write_files(
            tmp_project_dir, [PendingFile("a", os.path.join("styles", "main.css"))]
        )
        assert written[0].read_text(encoding="utf-8") == "a"

    @pytest.mark.asyncio
    async def test_empty_input(self, tmp_project_dir: Path):
        assert await write_files(tmp_project_dir, []) == []

    @pytest.mark.asyncio
    async def test_parent_is_a_file(self, tmp_project_dir: Path):
        tmp_project_dir.mkdir()
        (tmp_project_dir / "styles").write_text("not a dir", encoding="utf-8")
        with pytest.raises(ScaffoldIOError) as exc_info:
            await write_files(
                tmp_project_dir, [PendingFile("a", os.path.join("styles", "main.css"))]
            )
        assert exc_info.value.path.name == "main.css"

    @pytest.mark.asyncio
    async def test_write_failure_keeps_earlier_files(self, tmp_project_dir: Path):
        original = Path.write_text
        good = tmp_project_dir / "good.txt"

        def failing_write(self, *args, **kwargs):
            if self.name == "bad.txt":
                deadline = time.monotonic() + 5
                while not good.exists() and time.monotonic() < deadline:
                    time.sleep(0.01)
                raise PermissionError(13, "Permission denied")
            return original(self, *args, **kwargs)

        with patch.object(Path, "write_text", failing_write):
            with pytest.raises(ScaffoldIOError, match="Permission denied"):
                await write_files(
                    tmp_project_dir,
                    [PendingFile("ok", "good.txt"), PendingFile("x", "bad.txt")],
                )
        assert good.exists()

    @pytest.mark.asyncio
    async def test_absolute_destination_rejected_before_writing(self, tmp_path: Path):
        project = tmp_path / "site"
        outside = tmp_path / "outside"
        pending = [
            PendingFile("<html></html>", "index.html"),
            PendingFile("body {}", os.path.join(str(outside), "main.css")),
        ]
        with pytest.raises(ScaffoldIOError, match="escapes the project directory"):
            await write_files(project, pending)
        assert not project.exists()
        assert not outside.exists()

    @pytest.mark.asyncio
    async def test_parent_traversal_rejected(self, tmp_path: Path):
        project = tmp_path / "site"
        with pytest.raises(ScaffoldIOError) as exc_info:
            await write_files(project, [PendingFile("x", os.path.join("..", "main.js"))])
        assert exc_info.value.path.name == "main.js"
        assert not (tmp_path / "main.js").exists()
        assert not project.exists()

    @pytest.mark.asyncio
    async def test_dot_segments_inside_project_allowed(self, tmp_project_dir: Path):
        destination = os.path.join("styles", "..", "css", "main.css")
        written = await write_files(tmp_project_dir, [PendingFile("a", destination)])
        assert (tmp_project_dir / "css" / "main.css").read_text(encoding="utf-8") == "a"
        assert written[0].is_absolute()
