# -*- coding: utf-8 -*-
"""
End-to-end: built-in singular 3x3 scenario through every stage, and the CLI
exit codes.
"""
import io

import numpy as np
import pytest

from densesolve.errors import DimensionMismatchError
from densesolve.io.config import Scenario, default_scenario
from densesolve.main import main
from densesolve.workflows.run_scenario import run_scenario


def test_default_scenario_end_to_end():
    buf = io.StringIO()
    x = run_scenario(default_scenario(), stream=buf)
    assert len(x) == 3
    assert np.all(np.isfinite(x))
    A = np.array(default_scenario().A)
    np.testing.assert_allclose(A @ np.array(x), [10, 11, 12], atol=1e-9)

    lines = buf.getvalue().splitlines()
    titles = [
        "Initial coefficient matrix",
        "Initial right-hand side vector",
        "Dense coefficient matrix:",
        "Dense right-hand side vector:",
        "Dense solution vector:",
        "Solution vector",
    ]
    idx = [lines.index(t) for t in titles]
    assert idx == sorted(idx)
    # all 9 entries preserved before and after conversion
    assert lines[idx[0] + 3: idx[0] + 6] == ["1 2 3 ", "4 5 6 ", "7 8 9 "]
    assert lines[idx[2] + 3: idx[2] + 6] == ["1 2 3 ", "4 5 6 ", "7 8 9 "]
    assert lines[idx[3] + 1: idx[3] + 5] == ["Rows: 3", "10", "11", "12"]
    assert lines[idx[5] + 1] == "Columns: 3"
    assert lines.count("-" * 50) == 2


def test_well_posed_scenario():
    sc = Scenario(A=[[2.0, 0.0], [0.0, 2.0]], b=[4.0, 6.0])
    x = run_scenario(sc, stream=io.StringIO())
    np.testing.assert_allclose(x, [2.0, 3.0], atol=1e-9)


def test_cli_default_exit_zero(capsys):
    assert main([]) == 0
    assert "Solution vector" in capsys.readouterr().out


def test_cli_dimension_mismatch_exit_one(tmp_path, capsys):
    p = tmp_path / "bad.yaml"
    p.write_text("A: [[1, 2], [3, 4], [5, 6]]\nb: [1, 2]\n")
    assert main(["--config", str(p)]) == 1
    err = capsys.readouterr().err
    assert "ERROR [solve]" in err
    assert "3x2" in err


def test_cli_ragged_matrix_exit_one(tmp_path, capsys):
    p = tmp_path / "ragged.yaml"
    p.write_text("A: [[1, 2], [3]]\nb: [1, 2]\n")
    assert main(["--config", str(p)]) == 1
    assert "ERROR [conversion]" in capsys.readouterr().err


def test_cli_rank_deficient_scenario_exit_zero(tmp_path, capsys):
    p = tmp_path / "sing.yaml"
    p.write_text("A: [[1, 2], [2, 4]]\nb: [1, 0]\n")
    assert main(["--config", str(p)]) == 0
    out = capsys.readouterr().out
    assert "Solution vector" in out
    assert "Columns: 2" in out


def test_cli_has_no_mode_flag(capsys):
    with pytest.raises(SystemExit) as ei:
        main(["--mode", "exact"])
    assert ei.value.code == 2


def test_dimension_mismatch_stops_before_dense_dump():
    buf = io.StringIO()
    sc = Scenario(A=[[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]], b=[1.0, 2.0])
    with pytest.raises(DimensionMismatchError):
        run_scenario(sc, stream=buf)
    out = buf.getvalue()
    assert "Initial right-hand side vector" in out
    assert "Dense coefficient matrix:" not in out
    assert "-" * 50 not in out


def test_cli_missing_config_exit_one(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "nope.yaml")]) == 1
    assert "ERROR [config]" in capsys.readouterr().err
