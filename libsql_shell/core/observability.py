"""JSONL record of the statements run during one shell session."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, Protocol
from uuid import uuid4


def new_session_id() -> str:
    return f"session-{uuid4().hex[:8]}"


class StatementObservationSink(Protocol):
    """Records lifecycle events for statements run by the shell."""

    def log_event(self, event: str, payload: dict[str, Any]) -> None:  # pragma: no cover - interface
        ...


@dataclass(slots=True)
class JSONLStatementLogger(StatementObservationSink):
    """Appends one JSON object per event to ``<started>-<session_id>.jsonl``."""

    base_dir: Path
    session_id: str = field(default_factory=new_session_id)
    path: Path = field(init=False)

    def __post_init__(self) -> None:
        started = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
        self.path = self.base_dir.expanduser() / f"{started}-{self.session_id}.jsonl"

    def log_event(self, event: str, payload: dict[str, Any]) -> None:  # type: ignore[override]
        record = {key: value for key, value in payload.items() if value is not None}
        record["event"] = event
        record["session_id"] = self.session_id
        record["timestamp"] = datetime.now(UTC).isoformat(timespec="milliseconds")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as handle:
            json.dump(record, handle, ensure_ascii=False)
            handle.write("\n")
