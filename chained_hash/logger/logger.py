from typing import Optional

from chained_hash.config import LOGGER_NAME
from chained_hash.logger.log_types import DedupeLog, LogEvent, ResizeLog
import json
import logging

# Handlers are attached by whoever applies config.LOGGING
logger = logging.getLogger(LOGGER_NAME)


def log_resize_event(event: LogEvent, old_capacity: int, new_capacity: int, size: int):
    """Log a bucket table growth"""
    log_data: ResizeLog = {
        "event": event,
        "old_capacity": old_capacity,
        "new_capacity": new_capacity,
        "size": size
    }
    logger.info(json.dumps(log_data))


def log_dedupe_event(
    event: LogEvent,
    path: str,
    lines: Optional[int] = None,
    unique: Optional[int] = None,
    memory_mb: Optional[float] = None,
):
    """Log a dedupe progress event (counters are optional)"""
    log_data: DedupeLog = {
        "event": event,
        "path": path
    }
    if lines is not None:
        log_data["lines"] = lines
    if unique is not None:
        log_data["unique"] = unique
    if memory_mb is not None:
        log_data["memory_mb"] = round(memory_mb, 2)

    logger.info(json.dumps(log_data))
