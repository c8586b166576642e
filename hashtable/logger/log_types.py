from enum import Enum


class LogEvent(str, Enum):
    TABLE_CREATED = "table_created"
    TABLE_RESIZED = "table_resized"
    TABLE_CLEARED = "table_cleared"
    INVALID_ARGUMENT = "invalid_argument"
    DEDUPE_STARTED = "dedupe_started"
    DEDUPE_BUCKET_DONE = "dedupe_bucket_done"
    DEDUPE_FINISHED = "dedupe_finished"
