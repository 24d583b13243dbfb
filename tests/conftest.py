"""Shared pytest fixtures for the clean-scaffold test suite.

Provides reusable fixtures for:
- A temporary Flutter project (directory with ``pubspec.yaml``)
- A project that already contains a feature skeleton
- Environment isolation for ``CLEAN_SCAFFOLD_*`` variables
"""

from __future__ import annotations

from pathlib import Path

import pytest

from clean_scaffold.scaffolder import ScaffoldGenerator
from clean_scaffold.scaffolder.planner import SKELETON_DIRS


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's shell settings out of the tests."""
    monkeypatch.delenv("CLEAN_SCAFFOLD_ROOT", raising=False)
    monkeypatch.delenv("CLEAN_SCAFFOLD_INJECTABLE", raising=False)


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Temporary Flutter project root (auto-cleanup)."""
    project_dir = tmp_path / "flutter_app"
    project_dir.mkdir()
    (project_dir / "pubspec.yaml").write_text("name: flutter_app\n", encoding="utf-8")
    (project_dir / "lib").mkdir()
    yield project_dir


@pytest.fixture
def existing_feature(tmp_project_dir: Path) -> Path:
    """A ``blog_post`` feature skeleton with no files in it."""
    root = tmp_project_dir / "lib" / "features" / "blog_post"
    for rel in SKELETON_DIRS:
        (root / rel).mkdir(parents=True, exist_ok=True)
    return root


@pytest.fixture
def generator(tmp_project_dir: Path) -> ScaffoldGenerator:
    """A ScaffoldGenerator bound to the temporary project."""
    return ScaffoldGenerator(tmp_project_dir)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

@pytest.fixture
def snapshot():
    """Return a function mapping every path under a root to its content.

    Directories map to ``None``.
    """
    def _snapshot(root: Path) -> dict[str, str | None]:
        return {
            p.relative_to(root).as_posix(): None if p.is_dir() else p.read_text(encoding="utf-8")
            for p in sorted(root.rglob("*"))
        }

    return _snapshot
