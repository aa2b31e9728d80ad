from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import cpu.laplace
import common.sobel_dispatch
from common.log import setup_logger


def test_operator_loggers_are_left_unconfigured():
    for logger in (cpu.laplace.logger, common.sobel_dispatch.logger):
        assert logger.handlers == []
        assert logger.level == logging.NOTSET
        assert logger.propagate


def test_setup_logger_applies_configured_level():
    logger = setup_logger("edges.levelcheck", {"logging": {"level": "DEBUG"}})
    try:
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        setup_logger("edges.levelcheck", {"logging": {"level": "WARNING"}})
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1
    finally:
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


def test_operator_logs_reach_the_edges_logger(caplog):
    with caplog.at_level(logging.DEBUG, logger="edges"):
        cpu.laplace.logger.debug("routed")
    assert any(r.name == "edges.laplace" and r.message == "routed" for r in caplog.records)
