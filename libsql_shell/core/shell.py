"""Interactive read-eval-print loop for the SQL shell."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from libsql_shell.core.accumulator import InputAccumulator, LogicalUnit
from libsql_shell.core.config import PromptSettings
from libsql_shell.core.directives import DirectiveDispatcher, ShellExit, parse_directive
from libsql_shell.core.execution import SQLExecutor, run_statements
from libsql_shell.core.history import History
from libsql_shell.core.observability import StatementObservationSink, new_session_id

LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_READ_FAILURE = 1


@dataclass
class SQLShell:
    """Terminal shell that accumulates input and runs it statement by statement."""

    executor: SQLExecutor
    history: History = field(default_factory=History)
    prompts: PromptSettings = field(default_factory=PromptSettings)
    input_func: Callable[[str], str] = field(default=input)
    output_func: Callable[[str], None] = field(default=print)
    sink: StatementObservationSink | None = None
    session_id: str = field(default_factory=new_session_id)

    def __post_init__(self) -> None:
        self.accumulator = InputAccumulator(marker=self.prompts.directive_marker)
        self.directives = DirectiveDispatcher(
            executor=self.executor,
            output_func=self.output_func,
            sink=self.sink,
        )

    def start(self) -> int:
        """Run until end of input, ``.quit`` or a read failure; return the exit code."""

        self.history.load()
        try:
            return self._loop()
        finally:
            self.history.save()
            self.executor.close()

    def _loop(self) -> int:
        while True:
            prompt = self.accumulator.prompt_for(self.prompts.primary, self.prompts.continuation)
            try:
                line = self.input_func(prompt)
            except KeyboardInterrupt:
                self.accumulator.reset()
                self.output_func("")
                continue
            except EOFError:
                return EXIT_OK
            except Exception as exc:
                LOGGER.error("Failed to read input: %s", exc)
                self.output_func(f"Error: {exc}")
                return EXIT_READ_FAILURE

            unit = self.accumulator.feed(line)
            if unit is None:
                continue
            try:
                self.handle_unit(unit)
            except ShellExit as exit_request:
                return exit_request.code

    def handle_unit(self, unit: LogicalUnit) -> None:
        """Route a complete unit to the directive dispatcher or the executor."""

        if unit.is_directive:
            name, args = parse_directive(unit.text, unit.marker)
            self.directives.dispatch(name, args)
            return

        self.history.add(unit.text)
        summary = run_statements(
            self.executor,
            unit.text,
            self.output_func,
            sink=self.sink,
        )
        LOGGER.debug(
            "Unit finished: %d executed, %d failed", summary.executed, summary.failed
        )
