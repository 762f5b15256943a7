"""
Logging setup for the courses service
Console output always, rotating files when LOG_TO_FILE is set
"""

import logging
import logging.handlers
from datetime import datetime, timezone
from pathlib import Path
from pythonjsonlogger.json import JsonFormatter

from .settings import Config

LOGGER_NAME = 'courses_graphql'
TEXT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class CustomJsonFormatter(JsonFormatter):
    """JSON records stamped with UTC time, level and logger name"""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['logger'] = record.name


def build_formatter(log_format: str) -> logging.Formatter:
    if log_format == 'json':
        return CustomJsonFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')


def _rotating_handler(path: Path, config: Config, level: int) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.handlers.RotatingFileHandler(
        path,
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT
    )
    handler.setLevel(level)
    return handler


def setup_logger(config: Config) -> logging.Logger:
    """
    Configure the service logger

    Args:
        config: Configuration object with LOG_LEVEL, LOG_FORMAT and LOG_TO_FILE

    Returns:
        The `courses_graphql` logger, which every module logger propagates to
    """
    level = getattr(logging, config.LOG_LEVEL)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    handlers = [logging.StreamHandler()]
    handlers[0].setLevel(level)
    if config.LOG_TO_FILE:
        handlers.append(_rotating_handler(Path(config.LOG_FILE), config, level))
        handlers.append(_rotating_handler(Path(config.LOGS_DIR) / 'error.log', config, logging.ERROR))

    formatter = build_formatter(config.LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """Module logger by name, or the service logger when no name is given"""
    return logging.getLogger(name or LOGGER_NAME)


class LoggerMixin:
    """Gives repositories and services a logger named after their class"""

    @property
    def logger(self) -> logging.Logger:
        cls = self.__class__
        return logging.getLogger(f"{cls.__module__}.{cls.__name__}")

    def log_info(self, message: str):
        self.logger.info(message)

    def log_error(self, message: str):
        self.logger.error(message)

    def log_debug(self, message: str):
        self.logger.debug(message)
