from enum import Enum
from typing import Dict


class LogEvent(str, Enum):
    TABLE_CREATED = "table_created"
    TABLE_RESIZED = "table_resized"
    TABLE_CLEARED = "table_cleared"
    INVALID_ARGUMENT = "invalid_argument"
    KEY_REJECTED = "key_rejected"


class TableLog(Dict):
    event: LogEvent
    capacity: int
    size: int
    load_factor: float


class ErrorLog(Dict):
    event: LogEvent
    error: str
