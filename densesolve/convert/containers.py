# -*- coding: utf-8 -*-
"""
Shape-preserving conversion between nested sequences and dense float64 arrays.

  rows (list of lists)  <->  ndarray (m, n)
  values (list)         <->  ndarray (m,)

Values are copied element by element into zero-initialised arrays, so a
round trip that does not pass through a solve is bit-identical.
"""
from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

import numpy as np

from densesolve.errors import ShapeError

__all__ = [
    "matrix_shape",
    "to_dense_matrix",
    "to_dense_vector",
    "from_dense_matrix",
    "from_dense_vector",
]

Matrix = Sequence[Sequence[float]]
Vector = Sequence[float]


def matrix_shape(rows: Matrix) -> Tuple[int, int]:
    """Return (m, n) for a rectangular, non-empty nested sequence."""
    m = len(rows)
    if m == 0:
        raise ShapeError("conversion failed: matrix has no rows")
    n = len(rows[0])
    if n == 0:
        raise ShapeError(f"conversion failed: matrix has {m} rows but no columns")
    for i, row in enumerate(rows):
        if len(row) != n:
            raise ShapeError(
                f"conversion failed: row {i} has {len(row)} entries, expected {n} "
                f"(row 0 length)"
            )
    return m, n


def to_dense_matrix(rows: Matrix) -> np.ndarray:
    m, n = matrix_shape(rows)
    dense = np.zeros((m, n), dtype=np.float64)
    for i in range(m):
        for j in range(n):
            dense[i, j] = rows[i][j]
    return dense


def to_dense_vector(values: Vector) -> np.ndarray:
    dense = np.zeros(len(values), dtype=np.float64)
    for i in range(len(values)):
        dense[i] = values[i]
    return dense


def from_dense_matrix(dense: np.ndarray) -> List[List[float]]:
    m, n = dense.shape
    return [[float(dense[i, j]) for j in range(n)] for i in range(m)]


def from_dense_vector(dense: np.ndarray, hint: Optional[List[float]] = None) -> List[float]:
    """
    Copy a dense vector back into a plain list.

    If ``hint`` has exactly ``len(dense)`` slots it is overwritten in place and
    returned. Otherwise (no hint, empty hint, wrong length) a new list is built
    by appending the elements in index order; ``hint`` is left untouched.
    """
    size = int(dense.shape[0])
    if hint is not None and len(hint) == size:
        for i in range(size):
            hint[i] = float(dense[i])
        return hint

    out: List[float] = []
    for i in range(size):
        out.append(float(dense[i]))
    return out
