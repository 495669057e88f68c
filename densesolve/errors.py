# -*- coding: utf-8 -*-
"""
Error kinds raised by the conversion and solve stages.

All of them are input-contract violations (or a backend breakdown) and are
meant to propagate to the caller; only the CLI turns them into an exit code.
"""
from __future__ import annotations
from typing import Optional, Tuple

__all__ = ["DenseSolveError", "ShapeError", "DimensionMismatchError", "SolveFailure"]


class DenseSolveError(Exception):
    stage: str = "unknown"


class ShapeError(DenseSolveError, ValueError):
    """Matrix is empty or its rows differ in length."""
    stage = "conversion"


class DimensionMismatchError(DenseSolveError, ValueError):
    """Row count of A differs from the length of b."""
    stage = "solve"

    def __init__(self, a_shape: Tuple[int, int], b_len: int):
        self.a_shape = tuple(a_shape)
        self.b_len = int(b_len)
        super().__init__(
            f"A has {self.a_shape[0]} rows (shape {self.a_shape[0]}x{self.a_shape[1]}) "
            f"but b has length {self.b_len}"
        )


class SolveFailure(DenseSolveError, RuntimeError):
    """The dense backend could not produce a solution."""
    stage = "solve"

    def __init__(self, msg: str, a_shape: Optional[Tuple[int, ...]] = None):
        self.a_shape = tuple(a_shape) if a_shape is not None else None
        if self.a_shape is not None:
            msg = f"{msg} (A shape {'x'.join(map(str, self.a_shape))})"
        super().__init__(msg)
