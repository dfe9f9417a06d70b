"""Tests for discreet_rps.logger module."""

import logging
from discreet_rps.logger import setup_logger_from_config


def test_level_and_single_handler_setup():
    logger = setup_logger_from_config({"level": "debug"}, name="discreet_rps_test.levels")
    assert logger.level == logging.DEBUG
    handler_count = len(logger.handlers)
    assert handler_count == 1

    logger = setup_logger_from_config({"level": "ERROR"}, name="discreet_rps_test.levels")
    assert len(logger.handlers) == handler_count
    assert logger.level == logging.ERROR
    assert all(h.level == logging.ERROR for h in logger.handlers)


def test_unknown_level_falls_back_to_info():
    logger = setup_logger_from_config({"level": "chatty"}, name="discreet_rps_test.unknown")
    assert logger.level == logging.INFO
    logger = setup_logger_from_config({}, name="discreet_rps_test.empty")
    assert logger.level == logging.INFO


def test_log_file_handler(tmp_path):
    log_file = tmp_path / "logs" / "run.log"
    logger = setup_logger_from_config({"level": "INFO", "file": str(log_file)},
                                      name="discreet_rps_test.file")
    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
