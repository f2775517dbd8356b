"""Command-line entry point for the libSQL shell."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from libsql_shell.core.config import Settings, load_settings
from libsql_shell.core.history import History
from libsql_shell.core.observability import JSONLStatementLogger, new_session_id
from libsql_shell.core.shell import SQLShell
from libsql_shell.integrations.sqlite_executor import SQLiteExecutor, is_memory_path

VERSION = "0.2.0"

LOGGER = logging.getLogger(__name__)


def _configure_logging(level: int, debug: bool) -> None:
    root_logger = logging.getLogger()
    if root_logger.handlers:
        if debug:
            root_logger.setLevel(logging.DEBUG)
        return
    logging.basicConfig(
        level=logging.DEBUG if debug else level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="libsql", description="libSQL client")
    parser.add_argument("db_path", nargs="?", help="Database file; omit for an in-memory database")
    parser.add_argument("--config", help="Path to a YAML config file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def build_shell(settings: Settings, db_path: str | None = None) -> SQLShell:
    """Create the shell and its collaborators from *settings*."""

    path = db_path if db_path is not None else settings.database.path
    executor = SQLiteExecutor(path=None if is_memory_path(path) else path)
    history = History(path=settings.history.resolve_path())
    session_id = new_session_id()
    sink = None
    if settings.paths.statement_logs_dir:
        sink = JSONLStatementLogger(
            base_dir=Path(settings.paths.statement_logs_dir).expanduser(),
            session_id=session_id,
        )
    return SQLShell(
        executor=executor,
        history=history,
        prompts=settings.prompts,
        sink=sink,
        session_id=session_id,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings(args.config)
    _configure_logging(settings.logging.resolve_level(), args.debug)

    db_path = args.db_path if args.db_path is not None else settings.database.path
    print(f"libSQL version {VERSION}")
    shell = build_shell(settings, db_path)
    if is_memory_path(db_path):
        print("Connected to a transient in-memory database.")
    LOGGER.debug("Starting session %s", shell.session_id)
    return shell.start()


if __name__ == "__main__":
    sys.exit(main())
