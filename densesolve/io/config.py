# densesolve/io/config.py
# -*- coding: utf-8 -*-
"""
YAML → Scenario helpers.

Schema (minimal, example):

name: singular-3x3
A:
  - [1, 2, 3]
  - [4, 5, 6]
  - [7, 8, 9]
b: [10, 11, 12]

Only the document layout is checked here; shapes are checked by the
converter/orchestrator when the scenario is solved, always in the
least-squares sense.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

import yaml

__all__ = ["Scenario", "default_scenario", "load_scenario"]


@dataclass
class Scenario:
    A: List[List[float]]
    b: List[float]
    name: str = "default"
    path: Path | None = field(default=None, compare=False)


def default_scenario() -> Scenario:
    return Scenario(
        A=[[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]],
        b=[10.0, 11.0, 12.0],
        name="default",
    )


def load_scenario(path: Path) -> Scenario:
    data = yaml.safe_load(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError("Top-level YAML must be a mapping")
    _validate_minimum(data)

    A_yaml = data["A"]
    if not isinstance(A_yaml, list) or not all(isinstance(r, list) for r in A_yaml):
        raise ValueError("A must be a list of rows (lists of numbers)")
    b_yaml = data["b"]
    if not isinstance(b_yaml, list):
        raise ValueError("b must be a list of numbers")

    try:
        A = [[float(v) for v in row] for row in A_yaml]
        b = [float(v) for v in b_yaml]
    except (TypeError, ValueError) as exc:
        raise ValueError(f"non-numeric entry in A or b: {exc}") from exc

    return Scenario(
        A=A,
        b=b,
        name=str(data.get("name", Path(path).stem)),
        path=Path(path),
    )


def _validate_minimum(cfg: dict) -> None:
    for key in ("A", "b"):
        if key not in cfg:
            raise ValueError(f"Missing top-level key: {key}")
