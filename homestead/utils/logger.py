# homestead/utils/logger.py
import datetime
from collections import deque
from typing import Any, Deque, Dict, List, Optional

from homestead.config import LOG_HISTORY_SIZE, LOG_LEVEL

class LogLevel:
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4 # Only fatal errors

LEVEL_NAMES = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.CRITICAL: "CRIT"
}

class Logger:
    _instance = None
    _level = LOG_LEVEL
    _history: Deque[Dict[str, Any]] = deque(maxlen=LOG_HISTORY_SIZE)

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Logger, cls).__new__(cls)
        return cls._instance

    @classmethod
    def set_level(cls, level: int):
        """Sets the minimum logging level."""
        cls._level = level

    @classmethod
    def _log(cls, level: int, source: str, message: str):
        if level < cls._level:
            return
        now = datetime.datetime.now()
        level_name = LEVEL_NAMES.get(level, "LOG")

        # Recent records are kept so a debug command can dump them.
        cls._history.append({
            "timestamp": now.isoformat(timespec="seconds"),
            "level": level_name,
            "source": source,
            "message": message
        })

        # Format: [TIME] [LEVEL] [Source] Message
        print(f"[{now.strftime('%H:%M:%S')}] [{level_name:<5}] [{source}] {message}")

    @classmethod
    def debug(cls, source: str, message: str):
        cls._log(LogLevel.DEBUG, source, message)

    @classmethod
    def info(cls, source: str, message: str):
        cls._log(LogLevel.INFO, source, message)

    @classmethod
    def warning(cls, source: str, message: str):
        cls._log(LogLevel.WARNING, source, message)

    @classmethod
    def error(cls, source: str, message: str):
        cls._log(LogLevel.ERROR, source, message)

    @classmethod
    def critical(cls, source: str, message: str):
        cls._log(LogLevel.CRITICAL, source, message)

    @classmethod
    def get_history(cls, source: Optional[str] = None) -> List[Dict[str, Any]]:
        """Returns recorded log entries, optionally only those from one source."""
        if source is None:
            return list(cls._history)
        return [entry for entry in cls._history if entry["source"] == source]

    @classmethod
    def clear_history(cls):
        cls._history.clear()

