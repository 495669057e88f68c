# -*- coding: utf-8 -*-
"""
Single-run workflow wiring scenario → dense arrays → solve → plain list,
dumping every stage through io.report.
"""
from __future__ import annotations
import sys
from typing import List, Optional, TextIO

from densesolve.convert.containers import (
    from_dense_vector,
    to_dense_matrix,
    to_dense_vector,
)
from densesolve.io.config import Scenario
from densesolve.io.report import write_matrix, write_separator, write_vector
from densesolve.solver.least_squares import solve_dense
from densesolve.solver.linear import LinearBackend


def run_scenario(
    scenario: Scenario,
    stream: Optional[TextIO] = None,
    backend: Optional[LinearBackend] = None,
    debug: bool = False,
) -> List[float]:
    out = sys.stdout if stream is None else stream

    write_matrix(scenario.A, out, title="Initial coefficient matrix")
    write_vector(scenario.b, out, title="Initial right-hand side vector")

    A_dense = to_dense_matrix(scenario.A)
    b_dense = to_dense_vector(scenario.b)
    # dense stage is dumped only after a successful solve
    result = solve_dense(A_dense, b_dense, backend=backend, debug=debug)

    write_separator(out)
    write_matrix(A_dense, out, title="Dense coefficient matrix:")
    write_vector(b_dense, out, title="Dense right-hand side vector:")
    write_vector(result.x, out, title="Dense solution vector:")
    write_separator(out)

    x = from_dense_vector(result.x)
    write_vector(x, out, title="Solution vector", label="Columns")
    return x
