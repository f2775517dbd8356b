"""Tests for the line accumulation state machine."""

from __future__ import annotations

from libsql_shell.core.accumulator import Idle, InputAccumulator, LogicalUnit, Pending


def test_terminated_line_is_emitted_immediately() -> None:
    accumulator = InputAccumulator()

    unit = accumulator.feed("SELECT 1;   ")

    assert unit == LogicalUnit(text="SELECT 1;")
    assert accumulator.state == Idle()
    assert not unit.is_directive


def test_unterminated_line_becomes_pending_with_single_space() -> None:
    accumulator = InputAccumulator()

    assert accumulator.feed("SELECT *  ") is None
    assert accumulator.state == Pending("SELECT * ")
    assert accumulator.is_pending

    unit = accumulator.feed("FROM t;")

    assert unit is not None
    assert unit.text == "SELECT * FROM t;"
    assert accumulator.state == Idle()


def test_directive_is_complete_without_terminator() -> None:
    accumulator = InputAccumulator()

    unit = accumulator.feed(".tables")

    assert unit is not None
    assert unit.is_directive
    assert unit.text == ".tables"


def test_reset_discards_pending_text() -> None:
    accumulator = InputAccumulator()
    accumulator.feed("SELECT 'discarded'")

    accumulator.reset()
    unit = accumulator.feed("SELECT 2;")

    assert unit is not None
    assert unit.text == "SELECT 2;"
    assert "discarded" not in unit.text


def test_blank_line_while_idle_starts_a_continuation() -> None:
    accumulator = InputAccumulator()

    assert accumulator.feed("") is None
    assert accumulator.state == Pending(" ")


def test_prompt_reflects_state() -> None:
    accumulator = InputAccumulator()

    assert accumulator.prompt_for("main> ", "more> ") == "main> "
    accumulator.feed("SELECT")
    assert accumulator.prompt_for("main> ", "more> ") == "more> "


def test_custom_marker() -> None:
    accumulator = InputAccumulator(marker="\\")

    unit = accumulator.feed("\\quit")

    assert unit is not None
    assert unit.is_directive
    assert accumulator.feed(".quit") is None
