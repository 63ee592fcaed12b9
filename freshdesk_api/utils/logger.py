import logging
import os
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_LEVEL_ENV = "FRESHDESK_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Names of loggers configured by create_logger
_package_loggers = set()


def log_level_from_env() -> int:
    """Level named by FRESHDESK_LOG_LEVEL, INFO when unset or unknown"""
    name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).strip().upper()
    if name not in LOG_LEVELS:
        name = DEFAULT_LOG_LEVEL
    return getattr(logging, name)


def create_logger(service_name: str) -> logging.Logger:
    """
    Create (or fetch) a named logger with the package's console handler.

    Repeated calls with the same name return the same logger without
    stacking handlers. Only the log level variable is read here, so module
    level loggers never load the full settings or a .env file.

    Args:
        service_name: Logger name, usually the module or service name

    Returns:
        Configured logging.Logger
    """
    logger = logging.getLogger(service_name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(log_level_from_env())
        _package_loggers.add(service_name)
    return logger


def set_log_level(level: str) -> None:
    """Apply a level name to every logger configured by create_logger"""
    for name in _package_loggers:
        logging.getLogger(name).setLevel(getattr(logging, level.upper()))
