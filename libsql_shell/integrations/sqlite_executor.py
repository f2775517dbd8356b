"""SQLite-backed executor used by the interactive shell.

The connection is opened once and kept for the lifetime of the shell. Each
call to `run` receives exactly one statement produced by the splitter, so
prepare and execute happen through a single ``cursor.execute`` call and any
``sqlite3.Error`` is surfaced as a `StatementError`.
"""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass, field
from pathlib import Path

from libsql_shell.core.execution import StatementError, StatementResult

LOGGER = logging.getLogger(__name__)

MEMORY_PATH = ":memory:"


def is_memory_path(path: str | Path | None) -> bool:
    return path is None or str(path) in {"", MEMORY_PATH}


@dataclass(slots=True)
class SQLiteExecutor:
    """Execute statements against a single long-lived SQLite connection."""

    path: str | Path | None = None
    _connection: sqlite3.Connection | None = field(init=False, default=None)

    def __post_init__(self) -> None:
        target = MEMORY_PATH if is_memory_path(self.path) else str(Path(self.path).expanduser())
        LOGGER.debug("Opening SQLite database at %s", target)
        # Autocommit mode: explicit BEGIN/COMMIT typed by the user are honored as-is.
        self._connection = sqlite3.connect(target, isolation_level=None)

    def run(self, statement: str) -> StatementResult:
        connection = self._require_connection()
        try:
            cursor = connection.execute(statement)
            rows = [tuple(row) for row in cursor.fetchall()]
        except sqlite3.Error as exc:
            raise StatementError(str(exc)) from exc
        columns = [str(item[0]) for item in cursor.description or ()]
        return StatementResult(columns=columns, rows=rows)

    def close(self) -> None:
        if self._connection is None:
            return
        LOGGER.debug("Closing SQLite connection")
        self._connection.close()
        self._connection = None

    def _require_connection(self) -> sqlite3.Connection:
        if self._connection is None:
            raise StatementError("Database connection is closed")
        return self._connection
