"""
densesolve/utils/diagnostics.py

Low-noise diagnostics for a dense solve.
Call these from the orchestrator/workflows when debug=True.
"""

from __future__ import annotations

import numpy as np


def _fmt_range(x: np.ndarray, name: str) -> str:
    if x.size == 0:
        return f"{name}: (empty)"
    return f"{name}∈[{np.min(x):+.3e},{np.max(x):+.3e}]"


def log_solver_start(
    *,
    backend: str,
    mode: str,
    A: np.ndarray,
    b: np.ndarray,
    prefix: str = "[sol]",
) -> None:
    m, n = A.shape
    kind = "square" if m == n else ("over-determined" if m > n else "under-determined")
    print(
        f"{prefix} {backend} start | mode={mode} | A {m}x{n} ({kind}) | "
        f"{_fmt_range(A, 'A')} | {_fmt_range(b, 'b')}"
    )


def log_solve_summary(
    *,
    backend: str,
    mode: str,
    shape: tuple,
    rank: int,
    res_norm: float,
    x: np.ndarray,
    prefix: str = "[sol]",
) -> None:
    """One line: rank, residual, solution range."""
    full = min(shape)
    print(
        f"{prefix} {backend} done | mode={mode} | rank={rank}/{full} "
        f"(deficient={rank < full}) | ||Ax-b||_2={res_norm:.3e} | {_fmt_range(x, 'x')}"
    )
