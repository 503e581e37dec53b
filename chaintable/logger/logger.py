import json
import logging
import logging.config

from chaintable.config import LOGGER_NAME, LOGGING
from chaintable.logger.log_types import LogEvent

# Handlers come from configure_logging() with one of the dicts in chaintable.config
logger = logging.getLogger(LOGGER_NAME)


def configure_logging(config=None):
    """Apply a dictConfig; defaults to the one selected from the environment."""
    logging.config.dictConfig(config or LOGGING)
    return logger


def log_table_event(event: LogEvent, capacity: int, size: int, load_factor: float):
    """Log a table lifecycle event, at debug level since tables are created often"""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug(json.dumps({
        "event": event,
        "capacity": capacity,
        "size": size,
        "load_factor": load_factor
    }))


def log_resize_event(old_capacity: int, new_capacity: int, size: int):
    """Log a rehash"""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    logger.debug(json.dumps({
        "event": LogEvent.TABLE_RESIZED,
        "old_capacity": old_capacity,
        "new_capacity": new_capacity,
        "size": size
    }))


def log_error_event(event: LogEvent, error: str):
    """Log an error event"""
    logger.error(json.dumps({
        "event": event,
        "error": error
    }))
