# -*- coding: utf-8 -*-
"""
CLI logger: info to stdout, stage-tagged errors to stderr.
"""
import densesolve.utils as utils
from densesolve.utils import logger


def test_info_goes_to_stdout(capsys):
    logger.info("solved")
    cap = capsys.readouterr()
    assert cap.out.rstrip().endswith("] solved")
    assert cap.err == ""


def test_error_tagged_with_stage(capsys):
    logger.error("A has 3 rows", stage="solve")
    cap = capsys.readouterr()
    assert "ERROR [solve]: A has 3 rows" in cap.err
    assert cap.out == ""


def test_error_without_stage(capsys):
    logger.error("boom")
    assert "] ERROR: boom" in capsys.readouterr().err


def test_public_helpers():
    assert utils.__all__ == ["info", "error"]
