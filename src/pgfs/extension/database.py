"""SQLite host connection with the pgfs functions registered."""

from __future__ import annotations

import sqlite3
from pathlib import Path

from pgfs.copier.directory_copier import DirectoryCopier
from pgfs.extension.functions import register_functions
from pgfs.infrastructure.config import DATABASE_PATH, FUNCTION_NAME
from pgfs.infrastructure.logger import logger


class ExtensionDatabase:
    """Composition root that opens a connection and installs the SQL functions."""

    def __init__(self, copier: DirectoryCopier | None = None, function_name: str = FUNCTION_NAME) -> None:
        self._db: sqlite3.Connection | None = None
        self._copier = copier
        self.function_name = function_name

    @property
    def db(self) -> sqlite3.Connection:
        assert self._db is not None, "Database not initialized. Call init() first."
        return self._db

    def init(self, path: str = DATABASE_PATH) -> None:
        """Open (or create) the database at path; ':memory:' opens an in-memory one."""
        if path != ":memory:":
            Path(path).parent.mkdir(parents=True, exist_ok=True)
        self._db = sqlite3.connect(path)
        self._init_functions()
        logger.info("Opened database", path=path)

    def _init_test(self) -> None:
        """For tests only. Creates a fresh in-memory database."""
        self._db = sqlite3.connect(":memory:")
        self._init_functions()

    def _init_functions(self) -> None:
        assert self._db is not None
        register_functions(self._db, self._copier, self.function_name)

    def copy_dir(self, source: str, dest: str) -> bool:
        """Run the copy through SQL. Returns the function's result as a bool."""
        # The function name is an identifier, so it cannot be a bound parameter.
        row = self.db.execute(f"SELECT {self.function_name}(?, ?)", (source, dest)).fetchone()
        return bool(row[0])

    def close(self) -> None:
        if self._db is not None:
            self._db.close()
            self._db = None
