"""Human-readable rendering of query results."""

from __future__ import annotations

import base64
import math
from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from tabulate import tabulate

NULL_TOKEN = "null"
BLOB_PREFIX = "0x"


def format_value(value: Any) -> str:
    """Render a single SQLite value for display.

    Reals are written in plain positional notation (``1e20`` prints as
    ``100000000000000000000``). Blobs are shown as ``0x`` followed by unpadded
    standard base64 so the bytes can be recovered with :func:`decode_blob`.
    """

    if value is None:
        return NULL_TOKEN
    if isinstance(value, (bytes, bytearray, memoryview)):
        encoded = base64.b64encode(bytes(value)).decode("ascii").rstrip("=")
        return f"{BLOB_PREFIX}{encoded}"
    if isinstance(value, float):
        if not math.isfinite(value):
            return repr(value)
        return format(Decimal(repr(value)), "f")
    return str(value)


def decode_blob(text: str) -> bytes:
    """Invert the blob rendering produced by :func:`format_value`."""

    if not text.startswith(BLOB_PREFIX):
        raise ValueError(f"Not a rendered blob: {text!r}")
    payload = text[len(BLOB_PREFIX) :]
    padding = "=" * (-len(payload) % 4)
    return base64.b64decode(payload + padding)


def render_table(columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> str:
    """Return a psql-style table for *columns* and *rows*."""

    cells = [[format_value(value) for value in row] for row in rows]
    # Cells are already rendered; keep tabulate from re-parsing them as numbers.
    return tabulate(cells, headers=list(columns), tablefmt="psql", disable_numparse=True)
