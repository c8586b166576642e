from hashtable.config import LOGGER_NAME
from hashtable.logger.log_types import LogEvent
import json
import logging

# Same logger that configure_logging() wires to its handlers
logger = logging.getLogger(LOGGER_NAME)


def log_table_event(event: LogEvent, capacity: int, size: int, threshold: int,
                    previous_capacity: int = None):
    """Log a structural change of a hash table"""
    log_data = {
        "event": event,
        "capacity": capacity,
        "size": size,
        "threshold": threshold
    }
    if previous_capacity is not None:
        log_data["previous_capacity"] = previous_capacity

    logger.debug(json.dumps(log_data))


def log_error_event(event: LogEvent, error: str):
    """Log an error event"""
    logger.error(json.dumps({
        "event": event,
        "error": error
    }))


def log_dedupe_event(event: LogEvent, bucket_index: int = None, **fields):
    """Log a dedupe progress event (with optional bucket index)"""
    log_data = {"event": event}
    if bucket_index is not None:
        log_data["bucket_index"] = bucket_index
    log_data.update(fields)

    logger.info(json.dumps(log_data))
