"""Recursive directory copy, driven by an explicit stack of open directories.

Traversal is depth-first and pre-order: a subdirectory is copied completely
before the next entry of its parent is visited. The first failure at any depth
ends the whole copy. Nothing already written to the destination is rolled back.
"""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from pathlib import Path

from pgfs.copier.reporter import CopyReporter, LoggingReporter
from pgfs.copier.types import CopyFailure, CopyResult


@dataclass
class _Frame:
    """One directory whose entries are being copied."""

    source: Path
    destination: Path
    entries: list[Path]
    position: int = 0

    def next_entry(self) -> Path | None:
        if self.position >= len(self.entries):
            return None
        entry = self.entries[self.position]
        self.position += 1
        return entry


def _nest(failure: CopyFailure, subdirectories: list[Path]) -> CopyFailure:
    """Wrap a failure once per enclosing subdirectory, innermost first."""
    for subdirectory in reversed(subdirectories):
        failure = CopyFailure(kind="nested_copy_failed", path=str(subdirectory), cause=failure)
    return failure


class DirectoryCopier:
    """Copies a directory tree into a destination, creating directories as needed."""

    def __init__(self, reporter: CopyReporter | None = None) -> None:
        self._reporter = reporter if reporter is not None else LoggingReporter()

    def copy(self, source: str | os.PathLike[str], destination: str | os.PathLike[str]) -> bool:
        """Copy source into destination. Returns True only if every entry was copied."""
        return self.copy_tree(source, destination).success

    def copy_tree(self, source: str | os.PathLike[str], destination: str | os.PathLike[str]) -> CopyResult:
        """Copy source into destination and describe what happened.

        Filesystem errors never propagate: they end the copy and are returned
        as the result's failure. A failure inside a subdirectory is reported as
        a chain of nested_copy_failed entries ending in the original failure.
        """
        source_path = Path(source)
        destination_path = Path(destination)
        result = CopyResult(success=False, source=str(source_path), destination=str(destination_path))

        stack: list[_Frame] = []
        failure = self._open(source_path, destination_path, stack, result)

        while failure is None and stack:
            frame = stack[-1]
            entry = frame.next_entry()
            if entry is None:
                stack.pop()
                continue

            target = frame.destination / entry.name
            enclosing = [f.source for f in stack[1:]]
            if os.path.isdir(entry):
                failure = self._open(entry, target, stack, result)
                if failure is not None:
                    failure = _nest(failure, [*enclosing, entry])
            else:
                failure = self._copy_file(entry, target, result)
                if failure is not None:
                    failure = _nest(failure, enclosing)

        if failure is not None:
            result.failure = failure
            self._reporter.copy_failed(failure)
            return result

        result.success = True
        self._reporter.copy_succeeded(result)
        return result

    def _open(self, source: Path, destination: Path, stack: list[_Frame], result: CopyResult) -> CopyFailure | None:
        """Prepare one directory for copying and push it onto the stack."""
        if not os.path.exists(source):
            return CopyFailure(kind="source_missing", path=str(source))

        if not os.path.exists(destination):
            try:
                destination.mkdir(parents=True, exist_ok=True)
            except OSError as err:
                return CopyFailure(kind="destination_create_failed", path=str(destination), error=str(err))
            result.directories_created += 1
            self._reporter.destination_created(destination)

        # A source that exists but is not a directory fails here, not earlier.
        try:
            entries = list(source.iterdir())
        except OSError as err:
            return CopyFailure(kind="source_list_failed", path=str(source), error=str(err))

        stack.append(_Frame(source=source, destination=destination, entries=entries))
        return None

    def _copy_file(self, source: Path, destination: Path, result: CopyResult) -> CopyFailure | None:
        try:
            shutil.copyfile(source, destination)
            shutil.copymode(source, destination)
        except OSError as err:
            return CopyFailure(kind="file_copy_failed", path=str(source), error=str(err))
        result.files_copied += 1
        return None


def copy_dir(
    source: str | os.PathLike[str],
    destination: str | os.PathLike[str],
    reporter: CopyReporter | None = None,
) -> bool:
    """Copy a directory tree, logging the outcome. Returns True on full success."""
    return DirectoryCopier(reporter).copy(source, destination)
