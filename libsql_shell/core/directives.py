"""Built-in dot commands understood by the shell."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from libsql_shell.core.execution import SQLExecutor, run_statements
from libsql_shell.core.observability import StatementObservationSink

LOGGER = logging.getLogger(__name__)

LIST_TABLES_SQL = (
    "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%'"
)

DIRECTIVE_HELP = {
    "help": "Show this message",
    "quit": "Exit the shell",
    "tables [pattern]": "List tables, optionally filtered by a LIKE pattern such as 'user%'",
}


class ShellExit(Exception):
    """Signals that the shell loop should stop with the given exit code."""

    def __init__(self, code: int = 0) -> None:
        super().__init__(code)
        self.code = code


def parse_directive(text: str, marker: str = ".") -> tuple[str, list[str]]:
    """Split ``.name arg1 arg2`` into its name and arguments."""

    body = text[len(marker) :] if text.startswith(marker) else text
    name, _, rest = body.partition(" ")
    return name, rest.split()


@dataclass(slots=True)
class DirectiveDispatcher:
    """Routes parsed directives to their handlers."""

    executor: SQLExecutor
    output_func: Callable[[str], None] = field(default=print)
    sink: StatementObservationSink | None = None

    def dispatch(self, name: str, args: list[str]) -> None:
        LOGGER.debug("Dispatching directive %r with args %s", name, args)
        if name == "quit":
            raise ShellExit(0)
        if name == "tables":
            self.list_tables(args[0] if args else None)
            return
        if name == "help":
            self._show_help()
            return
        self.output_func(f"Unknown command '{name}'")

    def list_tables(self, pattern: str | None = None) -> None:
        statement = LIST_TABLES_SQL
        if pattern is not None:
            statement += f" AND name LIKE {pattern}"
        run_statements(
            self.executor,
            statement + ";",
            self.output_func,
            sink=self.sink,
        )

    def _show_help(self) -> None:
        width = max(len(usage) for usage in DIRECTIVE_HELP)
        for usage, description in DIRECTIVE_HELP.items():
            self.output_func(f".{usage.ljust(width)}  {description}")
