"""Diagnostic reporters the copier emits events to."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pgfs.infrastructure.logger import logger

if TYPE_CHECKING:
    from pathlib import Path

    import structlog

    from pgfs.copier.types import CopyFailure, CopyResult

_FAILURE_MESSAGES = {
    "source_missing": "Source directory does not exist",
    "destination_create_failed": "Failed to create destination directory",
    "source_list_failed": "Failed to read source directory",
    "nested_copy_failed": "Failed to copy subdirectory",
    "file_copy_failed": "Failed to copy file",
}


@runtime_checkable
class CopyReporter(Protocol):
    def destination_created(self, path: Path) -> None: ...
    def copy_failed(self, failure: CopyFailure) -> None: ...
    def copy_succeeded(self, result: CopyResult) -> None: ...


class LoggingReporter:
    """Writes one structlog event per copier event at info level."""

    def __init__(self, log: structlog.stdlib.BoundLogger | None = None) -> None:
        self._log = log or logger

    def destination_created(self, path: Path) -> None:
        self._log.info("Created destination directory", path=str(path))

    def copy_failed(self, failure: CopyFailure) -> None:
        root = failure.root_cause()
        self._log.info(
            _FAILURE_MESSAGES[root.kind],
            kind=root.kind,
            path=root.path,
            error=root.error,
            depth=failure.depth(),
        )

    def copy_succeeded(self, result: CopyResult) -> None:
        self._log.info(
            "Successfully copied directory",
            source=result.source,
            destination=result.destination,
            files=result.files_copied,
            directories=result.directories_created,
        )


class NullReporter:
    def destination_created(self, path: Path) -> None:
        pass

    def copy_failed(self, failure: CopyFailure) -> None:
        pass

    def copy_succeeded(self, result: CopyResult) -> None:
        pass
