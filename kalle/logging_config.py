"""Logging configuration for kalle"""
import logging
import sys
from pathlib import Path

LEVEL_COLORS = {
    logging.DEBUG: '\033[36m',
    logging.INFO: '\033[32m',
    logging.WARNING: '\033[33m',
    logging.ERROR: '\033[31m',
    logging.CRITICAL: '\033[35m',
}
RESET = '\033[0m'

DETAILED_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
BRIEF_FORMAT = '[%(name)s] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class ColoredFormatter(logging.Formatter):
    """Colors the level name when the log stream is a terminal."""

    def __init__(self, fmt=None, datefmt=None, stream=None):
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.stream = stream if stream is not None else sys.stderr

    def format(self, record):
        color = LEVEL_COLORS.get(record.levelno)
        if color is None or not self.stream.isatty():
            return super().format(record)
        # Other handlers share the record
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{RESET}"
        return super().format(colored)


def get_log_file() -> Path:
    """Location of the debug log file."""
    return Path.home() / '.kalle' / 'kalle.log'


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: If True, show INFO level messages
        debug: If True, show DEBUG level messages, use detailed formatting
            and also write everything to ~/.kalle/kalle.log
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if debug:
        log_file = get_log_file()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='w')  # Overwrite each run
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(fmt=DETAILED_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(file_handler)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(level)
    stderr_handler.setFormatter(ColoredFormatter(
        fmt=DETAILED_FORMAT if debug else BRIEF_FORMAT,
        datefmt=DATE_FORMAT if debug else None,
        stream=sys.stderr,
    ))
    root_logger.addHandler(stderr_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified module.

    Args:
        name: Name of the module (typically __name__)

    Returns:
        Logger instance
    """
    # Strip the package prefix for cleaner log names
    if name.startswith('kalle.'):
        name = name.replace('kalle.', '', 1)
    if name.startswith('services.'):
        name = name.replace('services.', '', 1)

    return logging.getLogger(name)
