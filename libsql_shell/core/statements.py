"""Lightweight lexical splitter for semicolon-terminated SQL input.

The scan only tracks single-quoted literals so that ``SELECT ';' FROM t;``
stays a single statement. Comments, doubled-quote escapes (``'it''s'``) and
other dialect quoting are not understood: every ``'`` toggles the literal
state.
"""

from __future__ import annotations

from collections.abc import Iterator

TERMINATOR = ";"
QUOTE = "'"


class SQLStatements(Iterator[str]):
    """Yields trimmed statements from a buffer, consuming it from the front."""

    def __init__(self, text: str) -> None:
        self._buffer = text

    @property
    def remainder(self) -> str:
        """Text that has not been yielded yet."""

        return self._buffer

    def __iter__(self) -> SQLStatements:
        return self

    def __next__(self) -> str:
        embedded = False
        start = 0
        for index, char in enumerate(self._buffer):
            if char == QUOTE:
                embedded = not embedded
                continue
            if embedded or char != TERMINATOR:
                continue
            candidate = self._buffer[start : index + 1]
            if not candidate or candidate.startswith(TERMINATOR):
                start = index + 1
                continue
            self._buffer = self._buffer[index + 1 :]
            return candidate.strip()
        raise StopIteration


def split_statements(text: str) -> SQLStatements:
    """Return a lazy iterator over the statements contained in *text*."""

    return SQLStatements(text)
