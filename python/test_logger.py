#!/usr/bin/env python3
"""ロガーのテスト"""
import logging

import pytest

from spaces_uploader.errors import ConfigurationError
from spaces_uploader.models.config import LoggingConfig
from spaces_uploader.utils.logger import LoggerManager
from spaces_uploader.utils.messages import loc


def test_setup_is_done_once(logger):
    again = LoggerManager.setup(LoggingConfig(level="ERROR"))
    assert again is logger
    assert logger.level == logging.DEBUG


def test_get_logger_before_setup():
    LoggerManager.reset()
    with pytest.raises(RuntimeError):
        LoggerManager.get_logger()


def test_file_handler(tmp_path):
    LoggerManager.reset()
    log_file = tmp_path / "logs" / "upload.log"
    logger = LoggerManager.setup(LoggingConfig(level="INFO", file=str(log_file)))

    logger.info("hello spaces")
    logger.debug("not written")
    for handler in logger.handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "hello spaces" in content
    assert "not written" not in content
    assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)


def test_message_templates():
    assert loc("UploadingFiles", "/build/out", "root", "releases") == \
        "Uploading files from /build/out to 'root' in bucket releases"
    assert loc("FileUploadProgress", "1 kB", "2 kB", "50.0") == "Uploaded 1 kB of 2 kB (50.0%)"


def test_level_override_wins_over_config():
    LoggerManager.reset()
    logger = LoggerManager.setup(LoggingConfig(level="WARNING"), level="DEBUG")
    assert logger.level == logging.DEBUG


def test_level_name_is_case_insensitive():
    LoggerManager.reset()
    logger = LoggerManager.setup(LoggingConfig(level="warning"))
    assert logger.level == logging.WARNING


def test_unknown_level_is_rejected():
    LoggerManager.reset()
    with pytest.raises(ConfigurationError):
        LoggerManager.setup(LoggingConfig(level="LOUD"))
    with pytest.raises(RuntimeError):
        LoggerManager.get_logger()
