# densesolve/__init__.py
from __future__ import annotations
from .errors import DenseSolveError, ShapeError, DimensionMismatchError, SolveFailure

__all__ = ["DenseSolveError", "ShapeError", "DimensionMismatchError", "SolveFailure"]
