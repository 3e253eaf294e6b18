"""Tests for file-based debug logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from intervue_coder.l4_frameworks_and_drivers.logging_setup import setup_file_logging


@pytest.fixture
def ivc_logger():
    logger = logging.getLogger('ivc')
    before = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in logger.handlers[len(before):]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)


def _flush(logger: logging.Logger) -> None:
    for handler in logger.handlers:
        handler.flush()


class TestSetupFileLogging:
    def test_creates_log_file_and_captures_child_loggers(self, tmp_path: Path, ivc_logger):
        log_path = setup_file_logging(tmp_path / 'logs')
        logging.getLogger('ivc.config').debug('hello from config')
        _flush(ivc_logger)

        assert log_path == (tmp_path / 'logs' / 'ivc_debug.log').resolve()
        text = log_path.read_text(encoding='utf-8')
        assert 'Debug logging started' in text
        assert 'ivc.config hello from config' in text

    def test_second_call_reuses_handler(self, tmp_path: Path, ivc_logger):
        count = len(ivc_logger.handlers)
        setup_file_logging(tmp_path)
        setup_file_logging(tmp_path)
        assert len(ivc_logger.handlers) == count + 1

        logging.getLogger('ivc.validate').warning('only once')
        _flush(ivc_logger)
        assert (tmp_path / 'ivc_debug.log').read_text(encoding='utf-8').count('only once') == 1

    def test_level_filters_records(self, tmp_path: Path, ivc_logger):
        log_path = setup_file_logging(tmp_path, level=logging.WARNING)
        logging.getLogger('ivc.config').info('quiet')
        logging.getLogger('ivc.config').warning('loud')
        _flush(ivc_logger)

        text = log_path.read_text(encoding='utf-8')
        assert 'quiet' not in text
        assert 'loud' in text
