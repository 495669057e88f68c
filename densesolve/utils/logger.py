# -*- coding: utf-8 -*-
"""
Print-based logger for the CLI: info -> stdout, errors -> stderr.
Solver traces go through utils.diagnostics instead.
"""
from __future__ import annotations
import sys, time

def _stamp() -> str:
    return time.strftime('%H:%M:%S')

def info(msg: str):  print(f"[{_stamp()}] {msg}", file=sys.stdout)

def error(msg: str, *, stage: str | None = None):
    where = f" [{stage}]" if stage else ""
    print(f"[{_stamp()}] ERROR{where}: {msg}", file=sys.stderr)
