"""Tests for statement dispatch."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from libsql_shell.core.execution import StatementResult, run_statements
from libsql_shell.core.formatting import render_table
from libsql_shell.integrations.in_memory_sql_executor import InMemorySQLExecutor


@dataclass
class _SinkStub:
    events: list[tuple[str, dict[str, Any]]] = field(default_factory=list)

    def log_event(self, event: str, payload: dict[str, Any]) -> None:
        self.events.append((event, payload))


def test_statements_run_in_source_order() -> None:
    executor = InMemorySQLExecutor()
    outputs: list[str] = []

    summary = run_statements(
        executor, "INSERT INTO t VALUES (1); SELECT * FROM t;", outputs.append
    )

    assert executor.statements == ["INSERT INTO t VALUES (1);", "SELECT * FROM t;"]
    assert summary.executed == 2
    assert summary.failed == 0
    assert outputs == []


def test_failure_does_not_stop_following_statements() -> None:
    executor = InMemorySQLExecutor()
    executor.fail("SELEC 1;", 'near "SELEC": syntax error')
    executor.prime("SELECT 2;", ["2"], [(2,)])
    outputs: list[str] = []

    summary = run_statements(executor, "SELEC 1; SELECT 2;", outputs.append)

    assert summary.failed == 1
    assert summary.executed == 1
    assert outputs[0] == 'Error: near "SELEC": syntax error'
    assert outputs[1] == render_table(["2"], [(2,)])


def test_custom_renderer_receives_columns_and_rows() -> None:
    executor = InMemorySQLExecutor(
        canned_results={"SELECT a, b FROM t;": StatementResult(columns=["a", "b"], rows=[(1, "x")])}
    )
    outputs: list[str] = []

    run_statements(
        executor,
        "SELECT a, b FROM t;",
        outputs.append,
        renderer=lambda columns, rows: f"{list(columns)}:{list(rows)}",
    )

    assert outputs == ["['a', 'b']:[(1, 'x')]"]


def test_sink_records_success_and_failure() -> None:
    executor = InMemorySQLExecutor()
    executor.fail("DROP TABLE missing;", "no such table: missing")
    sink = _SinkStub()

    run_statements(
        executor,
        "CREATE TABLE t(id); DROP TABLE missing;",
        lambda _: None,
        sink=sink,
    )

    assert [event for event, _ in sink.events] == ["statement_executed", "statement_failed"]
    assert sink.events[0][1]["row_count"] == 0
    assert sink.events[1][1]["error"] == "no such table: missing"


def test_incomplete_tail_is_not_executed() -> None:
    executor = InMemorySQLExecutor()

    summary = run_statements(executor, "SELECT 1; SELECT 'open;", lambda _: None)

    assert executor.statements == ["SELECT 1;"]
    assert summary.executed == 1
