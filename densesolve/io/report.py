# -*- coding: utf-8 -*-
"""
Text dumps of matrices/vectors for inspection.

Matrix:                 Vector:
  Rows: <m>               <label>: <m>
  Columns: <n>            v0
  a00 a01 ... (trailing   v1
  space on every row)     ...

Values use "%g" (6 significant digits, like a default C++ ostream).
Works on nested lists and on ndarrays alike.
"""
from __future__ import annotations
import sys
from typing import Any, Optional, TextIO

__all__ = ["format_value", "write_matrix", "write_vector", "write_separator"]

SEPARATOR = "-" * 50


def format_value(v: float) -> str:
    return f"{float(v):g}"


def write_matrix(rows: Any, stream: Optional[TextIO] = None, title: Optional[str] = None) -> None:
    stream = sys.stdout if stream is None else stream
    if title:
        stream.write(f"{title}\n")
    m = len(rows)
    n = len(rows[0]) if m else 0
    stream.write(f"Rows: {m}\n")
    stream.write(f"Columns: {n}\n")
    for row in rows:
        stream.write("".join(f"{format_value(v)} " for v in row))
        stream.write("\n")


def write_vector(
    values: Any,
    stream: Optional[TextIO] = None,
    title: Optional[str] = None,
    label: str = "Rows",
) -> None:
    stream = sys.stdout if stream is None else stream
    if title:
        stream.write(f"{title}\n")
    stream.write(f"{label}: {len(values)}\n")
    for v in values:
        stream.write(f"{format_value(v)}\n")


def write_separator(stream: Optional[TextIO] = None) -> None:
    stream = sys.stdout if stream is None else stream
    stream.write(SEPARATOR + "\n")
