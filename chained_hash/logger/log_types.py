from enum import Enum
from typing import TypedDict


class LogEvent(str, Enum):
    TABLE_RESIZED = "table_resized"
    DEDUPE_STARTED = "dedupe_started"
    PARTITION_DEDUPLICATED = "partition_deduplicated"
    DEDUPE_FINISHED = "dedupe_finished"


class ResizeLog(TypedDict):
    event: LogEvent
    old_capacity: int
    new_capacity: int
    size: int


class DedupeLog(TypedDict, total=False):
    event: LogEvent
    path: str
    lines: int
    unique: int
    memory_mb: float
