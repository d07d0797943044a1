# File: tests/test_logger.py
import logging
from logging.handlers import RotatingFileHandler

import pytest

from robots_builder import Group, RobotsTxt
from robots_builder.logger import configure, init_logging, logger


@pytest.fixture()
def restore_logger():
    yield
    init_logging()


def test_default_logger_is_quiet():
    assert logger.name == "RobotsBuilder"
    assert logger.level == logging.WARNING
    assert logger.propagate is False


def test_configure_with_file(tmp_path, restore_logger):
    log_file = tmp_path / "robots.log"
    lg = configure(level="DEBUG", log_file=log_file)
    assert lg.level == logging.DEBUG
    assert any(isinstance(h, RotatingFileHandler) for h in lg.handlers)

    RobotsTxt().add_group(Group("*").allow("/")).merge(RobotsTxt())
    for handler in lg.handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "Added group '*'" in text
    assert "Merged document" in text


def test_configure_append_handlers(restore_logger):
    lg = configure(level="INFO")
    count = len(lg.handlers)
    configure(level="INFO", replace_handlers=False)
    assert len(lg.handlers) == count + 1


def test_ignored_merge_is_logged(caplog, restore_logger):
    lg = configure(level="DEBUG")
    lg.addHandler(caplog.handler)
    try:
        Group("*").merge(Group("Googlebot"))
    finally:
        lg.removeHandler(caplog.handler)
    assert "Ignored merge of group 'Googlebot'" in caplog.text
