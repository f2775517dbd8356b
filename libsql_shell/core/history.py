"""Persistent, append-only history of submitted SQL."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

try:  # readline is missing on some platforms (e.g. Windows)
    import readline
except ImportError:  # pragma: no cover - platform dependent
    readline = None  # type: ignore[assignment]

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class History:
    """Chronological list of entries, loaded and saved on a best-effort basis.

    Entries are stored one per line. Multi-line input is already joined into a
    single line by the accumulator, so no escaping is required.
    """

    path: Path | None = None
    entries: list[str] = field(default_factory=list)
    use_readline: bool = True

    def load(self) -> None:
        if self.path is None:
            return
        try:
            text = self.path.expanduser().read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            LOGGER.debug("No history loaded from %s: %s", self.path, exc)
            return
        for line in text.splitlines():
            if line:
                self._append(line)

    def add(self, entry: str) -> None:
        self._append(entry)

    def save(self) -> None:
        if self.path is None:
            return
        target = self.path.expanduser()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            with target.open("w", encoding="utf-8") as handle:
                for entry in self.entries:
                    handle.write(entry.replace("\n", " "))
                    handle.write("\n")
        except OSError as exc:
            LOGGER.warning("Could not save history to %s: %s", target, exc)

    def _append(self, entry: str) -> None:
        self.entries.append(entry)
        if self.use_readline and readline is not None:
            readline.add_history(entry)
