"""Tests for copier result types."""

from pgfs.copier.types import CopyFailure, CopyResult


class TestCopyFailure:
    def test_root_cause_of_plain_failure_is_itself(self):
        failure = CopyFailure(kind="source_missing", path="/tmp/missing")
        assert failure.root_cause() is failure
        assert failure.depth() == 0

    def test_root_cause_follows_nested_chain(self):
        inner = CopyFailure(kind="file_copy_failed", path="/src/a/b/f.txt", error="denied")
        middle = CopyFailure(kind="nested_copy_failed", path="/src/a/b", cause=inner)
        outer = CopyFailure(kind="nested_copy_failed", path="/src/a", cause=middle)

        assert outer.root_cause() == inner
        assert outer.depth() == 2

    def test_dump_includes_cause(self):
        failure = CopyFailure(
            kind="nested_copy_failed",
            path="/src/a",
            cause=CopyFailure(kind="source_list_failed", path="/src/a", error="not a directory"),
        )
        data = failure.model_dump()
        assert data["cause"]["kind"] == "source_list_failed"
        assert data["cause"]["cause"] is None


class TestCopyResult:
    def test_truthiness_follows_success(self):
        assert bool(CopyResult(success=True, source="a", destination="b")) is True
        assert bool(CopyResult(success=False, source="a", destination="b")) is False

    def test_defaults(self):
        result = CopyResult(success=True, source="a", destination="b")
        assert result.files_copied == 0
        assert result.directories_created == 0
        assert result.failure is None
