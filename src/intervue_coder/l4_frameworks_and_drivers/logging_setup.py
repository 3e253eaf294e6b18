"""File-based debug logging for the ``ivc`` logger tree."""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FILE_NAME = 'ivc_debug.log'
_FORMAT = '%(asctime)s %(levelname)s %(name)s %(message)s'


def setup_file_logging(log_dir: Path, level: int = logging.DEBUG) -> Path:
    """Send ``ivc.*`` records at *level* and above to ``<log_dir>/ivc_debug.log``.

    Calling again with the same directory reuses the existing handler.
    Returns the log file path.
    """
    log_path = (log_dir / LOG_FILE_NAME).resolve()
    logger = logging.getLogger('ivc')
    logger.setLevel(level)

    for existing in logger.handlers:
        if isinstance(existing, logging.FileHandler) and Path(existing.baseFilename).resolve() == log_path:
            existing.setLevel(level)
            return log_path

    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_path, encoding='utf-8')
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logging.getLogger('ivc.cli').info('Debug logging started → %s', log_path)
    return log_path
