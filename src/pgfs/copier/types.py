"""Directory copier domain types."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

CopyFailureKind = Literal[
    "source_missing",
    "destination_create_failed",
    "source_list_failed",
    "nested_copy_failed",
    "file_copy_failed",
]


class CopyFailure(BaseModel):
    kind: CopyFailureKind
    path: str
    error: str | None = None
    cause: CopyFailure | None = None

    def root_cause(self) -> CopyFailure:
        """Follow nested_copy_failed links down to the failure that started it."""
        failure = self
        while failure.cause is not None:
            failure = failure.cause
        return failure

    def depth(self) -> int:
        """Number of subdirectory levels between the top-level call and the root cause."""
        depth = 0
        failure = self
        while failure.cause is not None:
            failure = failure.cause
            depth += 1
        return depth


class CopyResult(BaseModel):
    success: bool
    source: str
    destination: str
    files_copied: int = 0
    directories_created: int = 0
    failure: CopyFailure | None = None

    def __bool__(self) -> bool:
        return self.success
