# densesolve/utils/__init__.py
from __future__ import annotations
from .logger import info, error

__all__ = ["info", "error"]
