"""Joins raw input lines into complete logical units for the shell."""

from __future__ import annotations

from dataclasses import dataclass, field

DIRECTIVE_MARKER = "."
LINE_SEPARATOR = " "


@dataclass(frozen=True, slots=True)
class Idle:
    """No continuation in progress."""


@dataclass(frozen=True, slots=True)
class Pending:
    """Partial input waiting for a terminator."""

    text: str


AccumulatorState = Idle | Pending


@dataclass(frozen=True, slots=True)
class LogicalUnit:
    text: str
    marker: str = DIRECTIVE_MARKER

    @property
    def is_directive(self) -> bool:
        return self.text.startswith(self.marker)


@dataclass(slots=True)
class InputAccumulator:
    """Two-state machine deciding when buffered input is ready to run.

    A unit is complete once the joined text ends with ``;`` or starts with
    the directive marker. Until then each line is buffered with a single
    space appended as the join separator.
    """

    marker: str = DIRECTIVE_MARKER
    state: AccumulatorState = field(default_factory=Idle)

    @property
    def is_pending(self) -> bool:
        return isinstance(self.state, Pending)

    def feed(self, line: str) -> LogicalUnit | None:
        """Consume one raw line; return a unit when the input is complete."""

        pending = self.state.text if isinstance(self.state, Pending) else ""
        joined = pending + line.rstrip()
        if joined.endswith(";") or joined.startswith(self.marker):
            self.state = Idle()
            return LogicalUnit(text=joined, marker=self.marker)
        self.state = Pending(joined + LINE_SEPARATOR)
        return None

    def reset(self) -> None:
        """Drop any pending text, e.g. after the user interrupts entry."""

        self.state = Idle()

    def prompt_for(self, primary: str, continuation: str) -> str:
        return continuation if self.is_pending else primary
