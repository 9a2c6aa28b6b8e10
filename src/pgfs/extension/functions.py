"""SQL function bindings that expose the directory copier to a database."""

from __future__ import annotations

import sqlite3
from typing import Callable

from pgfs.copier.directory_copier import DirectoryCopier
from pgfs.infrastructure.config import FUNCTION_NAME
from pgfs.infrastructure.logger import logger


def make_copy_dir_function(copier: DirectoryCopier) -> Callable[[object, object], int | None]:
    """Build the two-argument SQL callable. NULL in, NULL out; otherwise 1 or 0."""

    def pgfs_copy_dir(source: object, dest: object) -> int | None:
        if source is None or dest is None:
            return None
        return 1 if copier.copy(str(source), str(dest)) else 0

    return pgfs_copy_dir


def register_functions(
    db: sqlite3.Connection,
    copier: DirectoryCopier | None = None,
    name: str = FUNCTION_NAME,
) -> None:
    """Register the copy-directory function on a connection under the given name."""
    db.create_function(name, 2, make_copy_dir_function(copier or DirectoryCopier()))
    logger.debug("Registered SQL function", name=name)
