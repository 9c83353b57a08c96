import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from core.config import Settings

DEFAULT_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
DEFAULT_DATEFMT = '%Y-%m-%d %H:%M:%S'

CONSOLE_HANDLER = "astrowatch.console"
FILE_HANDLER = "astrowatch.file"


def setup_logging(
        settings: Settings,
        log_file: str = "astrowatch.log",
        max_bytes: int = 10 * 1024 * 1024,  # 10 MB
        backup_count: int = 5
) -> logging.Logger:
    """Attach console and rotating-file handlers to the root logger.

    Safe to call more than once: handlers installed by a previous call are
    replaced, anything else attached to the root logger is left alone.
    """
    logger = logging.getLogger()
    logger.setLevel(settings.LOG_LEVEL.upper())

    for handler in list(logger.handlers):
        if handler.get_name() in (CONSOLE_HANDLER, FILE_HANDLER):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(DEFAULT_FORMAT, DEFAULT_DATEFMT)

    console_handler = logging.StreamHandler()
    console_handler.set_name(CONSOLE_HANDLER)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if settings.LOG_DIR:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            filename=log_dir / log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.set_name(FILE_HANDLER)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
