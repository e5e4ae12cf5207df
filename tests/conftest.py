"""Test configuration and fixtures for dir2tree."""

import pytest


@pytest.fixture
def project(tmp_path):
    """Create a small project without pattern sources.

    Layout (sorted):
        Project/
            .venv/pyvenv.cfg        dot-file rule
            Docs/guide.md
            README.md
            Source/helpers.py
            Source/main.py
            bin/app.exe             build-artifact heuristic
            node_modules/lib.js
            notes.txt
    """
    root = tmp_path / "Project"
    root.mkdir()
    (root / ".venv").mkdir()
    (root / ".venv" / "pyvenv.cfg").write_text("home = /usr/bin\n")
    (root / "Docs").mkdir()
    (root / "Docs" / "guide.md").write_text("# Guide\n")
    (root / "README.md").write_text("# Project\n")
    (root / "Source").mkdir()
    (root / "Source" / "helpers.py").write_text("def helper(): pass\n")
    (root / "Source" / "main.py").write_text("def main(): pass\n")
    (root / "bin").mkdir()
    (root / "bin" / "app.exe").write_bytes(b"MZ")
    (root / "node_modules").mkdir()
    (root / "node_modules" / "lib.js").write_text("export default {}\n")
    (root / "notes.txt").write_text("notes\n")
    return root
