import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from pythonjsonlogger.json import JsonFormatter

from ai2fs import config

APP_LOG_FILE_NAME = 'ai2fs.log'

_file_logging_warned = False


def _build_file_handler():
    """Rotating JSON file handler, or None when the log dir is not writable."""
    global _file_logging_warned
    log_file = os.path.join(config.LOG_DIR, APP_LOG_FILE_NAME)
    try:
        os.makedirs(config.LOG_DIR, exist_ok=True)
        # Rotating: 5 files of 5MB each
        return RotatingFileHandler(log_file, maxBytes=5*1024*1024, backupCount=5, encoding='utf-8')
    except OSError as e:
        if not _file_logging_warned:
            print(f"⚠️ [LOGGER] Cannot write {log_file} ({e}). File logging disabled.", file=sys.stderr)
            _file_logging_warned = True
        return None


def setup_logger(name):
    """
    Sets up a structured logger with rotation.
    Format: [Time] [Level] [Module]: Message
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))

    # Avoid duplicate handlers if setup is called multiple times
    if not logger.handlers:
        file_handler = _build_file_handler()
        if file_handler is not None:
            formatter = JsonFormatter(
                '%(asctime)s %(levelname)s %(name)s %(message)s %(filename)s %(funcName)s %(lineno)d',
                rename_fields={"asctime": "timestamp", "levelname": "level", "name": "logger"},
                datefmt='%Y-%m-%dT%H:%M:%S%z'
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        # Console Handler (opt-in, the CLI already prints its own progress lines)
        if config.LOG_TO_CONSOLE:
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(JsonFormatter('%(asctime)s %(levelname)s %(message)s'))
            logger.addHandler(console_handler)

        if not logger.handlers:
            # Keeps logging's last-resort handler from printing to stderr
            logger.addHandler(logging.NullHandler())

    return logger
