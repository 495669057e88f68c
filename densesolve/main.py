# densesolve/main.py
"""
densesolve main entrypoint.

Usage examples:
    python -m densesolve
    python -m densesolve --config scenario.yaml
    python -m densesolve --config scenario.yaml --debug
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

import yaml

from .errors import DenseSolveError
from .io.config import default_scenario, load_scenario
from .utils import logger
from .workflows.run_scenario import run_scenario

__all__ = ["main"]


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="densesolve",
        description="densesolve — nested lists → dense arrays → least-squares solve",
    )
    p.add_argument(
        "--config", type=Path, default=None,
        help="YAML scenario with A (rows) and b; default: built-in 3x3 example"
    )
    p.add_argument("--debug", action="store_true", help="Verbose solver prints")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    ns = _build_parser().parse_args(argv)

    try:
        scenario = load_scenario(ns.config) if ns.config is not None else default_scenario()
    except (OSError, ValueError, yaml.YAMLError) as exc:
        logger.error(f"could not load scenario {ns.config}: {exc}", stage="config")
        return 1

    try:
        run_scenario(scenario, debug=ns.debug)
    except DenseSolveError as exc:
        logger.error(str(exc), stage=exc.stage)
        return 1

    if ns.debug:
        logger.info(f"scenario '{scenario.name}' solved")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
