"""Shared fixtures for pgfs tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest

from pgfs.copier.types import CopyFailure, CopyResult


class RecordingReporter:
    """Reporter that keeps every event it receives, in order."""

    def __init__(self) -> None:
        self.events: list[tuple[str, Any]] = []

    def destination_created(self, path: Path) -> None:
        self.events.append(("destination_created", path))

    def copy_failed(self, failure: CopyFailure) -> None:
        self.events.append(("copy_failed", failure))

    def copy_succeeded(self, result: CopyResult) -> None:
        self.events.append(("copy_succeeded", result))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]


def _write_tree(root: Path, files: dict[str, str]) -> Path:
    root.mkdir(parents=True, exist_ok=True)
    for rel_path, content in files.items():
        full_path = root / rel_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_text(content, encoding="utf-8")
    return root


def _snapshot(root: Path) -> dict[str, str | None]:
    result: dict[str, str | None] = {}
    for path in root.rglob("*"):
        rel = path.relative_to(root).as_posix()
        result[rel] = None if path.is_dir() else path.read_text(encoding="utf-8")
    return result


@pytest.fixture()
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture()
def make_tree() -> Callable[[Path, dict[str, str]], Path]:
    """Create files (and their parent directories) under a root from relative paths."""
    return _write_tree


@pytest.fixture()
def tree_snapshot() -> Callable[[Path], dict[str, str | None]]:
    """Map every relative path under a root to its file contents, or None for directories."""
    return _snapshot


@pytest.fixture()
def source_tree(tmp_path: Path) -> Path:
    """A small source tree: x.txt and b/y.txt."""
    return _write_tree(tmp_path / "a", {"x.txt": "hello", "b/y.txt": "world"})
