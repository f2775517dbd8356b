"""Runs segmented statements against a SQL engine and reports the outcome.

Every statement in a logical unit is executed in source order. A failure is
printed and recorded but never stops the statements that follow it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Protocol, Sequence

from libsql_shell.core.formatting import render_table
from libsql_shell.core.observability import StatementObservationSink
from libsql_shell.core.statements import split_statements

LOGGER = logging.getLogger(__name__)


class StatementError(Exception):
    """Raised when a statement fails to prepare or execute."""


@dataclass(slots=True)
class StatementResult:
    columns: list[str] = field(default_factory=list)
    rows: list[tuple[Any, ...]] = field(default_factory=list)


class SQLExecutor(Protocol):
    """Abstracts the embedded database engine."""

    def run(self, statement: str) -> StatementResult:  # pragma: no cover - interface
        """Prepare and execute a single statement, raising `StatementError`."""

    def close(self) -> None:  # pragma: no cover - interface
        """Release the underlying connection."""


@dataclass(slots=True)
class ExecutionSummary:
    executed: int = 0
    failed: int = 0


def run_statements(
    executor: SQLExecutor,
    text: str,
    emit: Callable[[str], None],
    *,
    renderer: Callable[[Sequence[str], Sequence[Sequence[Any]]], str] = render_table,
    sink: StatementObservationSink | None = None,
) -> ExecutionSummary:
    """Split *text* into statements and execute them one after another."""

    summary = ExecutionSummary()
    for statement in split_statements(text):
        try:
            result = executor.run(statement)
        except StatementError as exc:
            summary.failed += 1
            LOGGER.debug("Statement failed: %s (%s)", statement, exc)
            if sink is not None:
                sink.log_event("statement_failed", {"statement": statement, "error": str(exc)})
            emit(f"Error: {exc}")
            continue

        summary.executed += 1
        if sink is not None:
            sink.log_event(
                "statement_executed",
                {
                    "statement": statement,
                    "row_count": len(result.rows),
                    "column_count": len(result.columns),
                },
            )
        if not result.rows:
            continue
        emit(renderer(result.columns, result.rows))
    return summary
