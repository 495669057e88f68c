# -*- coding: utf-8 -*-
"""
Dense linear solver backends.
Keep the API tiny (one ``solve(A, b, mode)``) so NumPy can be swapped for
SciPy/another LAPACK wrapper later without touching the orchestrator.

Mode "approx": least squares, min ||A x - b||_2 (SVD, minimum-norm). Works
for singular, rank-deficient and rectangular A; it is the only mode the
orchestrator asks for.
"""
from __future__ import annotations
from typing import Literal, Protocol, Tuple

import numpy as np

from densesolve.errors import SolveFailure

__all__ = ["APPROX", "SolveMode", "LinearBackend", "NumpyBackend"]

SolveMode = Literal["approx"]
APPROX: SolveMode = "approx"


class LinearBackend(Protocol):
    name: str

    def solve(self, A: np.ndarray, b: np.ndarray, mode: SolveMode) -> Tuple[np.ndarray, int]:
        """Return (x, effective rank of A)."""
        ...


class NumpyBackend:
    name = "numpy"

    def __init__(self, rcond: float | None = None):
        # None -> machine precision * max(m, n), NumPy's default cut-off
        self.rcond = rcond

    def solve(self, A: np.ndarray, b: np.ndarray, mode: SolveMode) -> Tuple[np.ndarray, int]:
        if mode != APPROX:
            raise ValueError(f"Unknown solve mode: {mode!r} (expected {APPROX!r})")
        try:
            x, _res, rank, _sv = np.linalg.lstsq(A, b, rcond=self.rcond)
        except np.linalg.LinAlgError as exc:
            raise SolveFailure(f"least-squares solve failed: {exc}", A.shape) from exc
        return x, int(rank)
