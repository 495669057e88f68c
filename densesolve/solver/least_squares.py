# densesolve/solver/least_squares.py
# Solve orchestrator: shape contract around a backend solve(A, b, mode).
# Numerics live in the backend; the backend is always asked for least squares.

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np

from densesolve.convert.containers import (
    from_dense_vector,
    to_dense_matrix,
    to_dense_vector,
)
from densesolve.errors import DimensionMismatchError, SolveFailure
from densesolve.solver.linear import APPROX, LinearBackend, NumpyBackend
from densesolve.utils import diagnostics as diag

__all__ = ["SolveResult", "solve_dense", "solve_least_squares", "solve"]


@dataclass
class SolveResult:
    x: np.ndarray           # length n (columns of A)
    residual_norm: float    # ||A x - b||_2
    rank: int


def solve_dense(
    A: np.ndarray,
    b: np.ndarray,
    *,
    backend: Optional[LinearBackend] = None,
    debug: bool = False,
) -> SolveResult:
    """Solve on already-converted arrays. A is (m, n), b is (m,)."""
    m, n = A.shape
    if b.shape[0] != m:
        raise DimensionMismatchError((m, n), b.shape[0])

    backend = backend if backend is not None else NumpyBackend()
    if debug:
        diag.log_solver_start(backend=backend.name, mode=APPROX, A=A, b=b)

    x, rank = backend.solve(A, b, APPROX)
    x = np.asarray(x, dtype=np.float64)
    if x.shape != (n,):
        raise SolveFailure(
            f"backend '{backend.name}' returned x of shape {x.shape}, expected ({n},)", A.shape
        )
    if not np.all(np.isfinite(x)):
        raise SolveFailure(f"backend '{backend.name}' returned non-finite values", A.shape)

    res_norm = float(np.linalg.norm(A @ x - b))
    if debug:
        diag.log_solve_summary(
            backend=backend.name, mode=APPROX, shape=(m, n), rank=rank, res_norm=res_norm, x=x
        )
    return SolveResult(x=x, residual_norm=res_norm, rank=rank)


def solve_least_squares(
    A: Sequence[Sequence[float]],
    b: Sequence[float],
    *,
    backend: Optional[LinearBackend] = None,
    debug: bool = False,
) -> SolveResult:
    """Convert A, b to dense form and solve A x ≈ b in the least-squares sense.

    Singular, rank-deficient and rectangular A all give a best-fit x.

    Parameters
    ----------
    A : rectangular nested sequence, m rows by n columns.
    b : sequence of length m.
    backend : object with ``solve(A, b, mode) -> (x, rank)``; NumPy by default.
    debug : print a start/summary line per solve.

    Raises
    ------
    ShapeError : A empty or ragged.
    DimensionMismatchError : len(b) != rows of A.
    SolveFailure : backend breakdown, or a result of the wrong length.
    """
    return solve_dense(to_dense_matrix(A), to_dense_vector(b), backend=backend, debug=debug)


def solve(A, b, **kwargs) -> List[float]:
    return from_dense_vector(solve_least_squares(A, b, **kwargs).x)
