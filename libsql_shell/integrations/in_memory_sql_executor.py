"""Lightweight, in-memory SQL executor stub.

This executor does not parse SQL or connect to a database. It returns canned
results (or canned failures) keyed by the exact statement text and records
every statement it receives. Use it inside tests or when wiring the shell
without a real engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from libsql_shell.core.execution import StatementError, StatementResult


@dataclass(slots=True)
class InMemorySQLExecutor:
    """Simple mapping-based executor that satisfies the `SQLExecutor` protocol."""

    canned_results: dict[str, StatementResult] = field(default_factory=dict)
    canned_errors: dict[str, str] = field(default_factory=dict)
    statements: list[str] = field(default_factory=list)
    closed: bool = False

    def run(self, statement: str) -> StatementResult:
        """Return the canned result for the supplied SQL statement."""

        self.statements.append(statement)
        if statement in self.canned_errors:
            raise StatementError(self.canned_errors[statement])
        result = self.canned_results.get(statement)
        if result is None:
            return StatementResult()
        return StatementResult(columns=list(result.columns), rows=list(result.rows))

    def prime(self, statement: str, columns: list[str], rows: list[tuple]) -> None:
        """Register a canned response for a future `run` call."""

        self.canned_results[statement] = StatementResult(columns=list(columns), rows=list(rows))

    def fail(self, statement: str, message: str) -> None:
        """Register a canned failure for a future `run` call."""

        self.canned_errors[statement] = message

    def close(self) -> None:
        self.closed = True
