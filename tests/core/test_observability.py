"""Tests for the JSONL statement sink."""

from __future__ import annotations

import json
from pathlib import Path

from libsql_shell.core.observability import JSONLStatementLogger, new_session_id


def _load_events(path: Path) -> list[dict[str, object]]:
    with path.open("r", encoding="utf-8") as handle:
        return [json.loads(line) for line in handle]


def test_jsonl_statement_logger_appends_events(tmp_path: Path) -> None:
    logger = JSONLStatementLogger(base_dir=tmp_path / "logs", session_id="session-1")

    logger.log_event("statement_executed", {"statement": "SELECT 1;", "row_count": 1})
    logger.log_event("statement_failed", {"statement": "SELEC;", "error": "syntax error"})

    files = sorted((tmp_path / "logs").glob("*.jsonl"))
    assert files == [logger.path]
    assert logger.path.name.endswith("-session-1.jsonl")
    events = _load_events(logger.path)
    assert [event["event"] for event in events] == ["statement_executed", "statement_failed"]
    assert {event["session_id"] for event in events} == {"session-1"}
    assert events[0]["row_count"] == 1
    assert events[1]["error"] == "syntax error"
    assert "timestamp" in events[0]


def test_jsonl_statement_logger_drops_none_values(tmp_path: Path) -> None:
    logger = JSONLStatementLogger(base_dir=tmp_path)

    logger.log_event("statement_executed", {"statement": "SELECT 1;", "error": None})

    events = _load_events(logger.path)
    assert "error" not in events[0]
    assert str(events[0]["session_id"]).startswith("session-")


def test_new_session_ids_are_unique() -> None:
    assert new_session_id() != new_session_id()
