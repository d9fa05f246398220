"""
Process-wide log sink implementing a lazily initialized Singleton.

The single instance is created on first access through
``Logger.get_instance()``. Concurrent first access is made safe with
double-checked locking: an unlocked read of the class-level reference on
the fast path, then a lock and a second check before constructing.
"""

import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import ClassVar, Optional

from ..errors import SingletonViolationError
from ..logging.config import get_pattern_logger
from ..output import OutputSink
from ..utils.time import DEFAULT_TIMESTAMP_FORMAT, format_timestamp, now_local

LOG_HEADER = "----- LOG ENTRIES -----"
LOG_FOOTER = "----- END OF LOGS -----"
NO_ENTRIES = "No log entries found."

# Held only by get_instance(); __init__ rejects any other key
_CONSTRUCTION_KEY = object()


class LogLevel(Enum):
    """Severity attached to a log entry."""
    INFO = "INFO"
    ERROR = "ERROR"
    WARNING = "WARNING"


@dataclass(frozen=True)
class LogEntry:
    """A single recorded log line."""
    timestamp: datetime
    level: LogLevel
    message: str
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT

    def format(self) -> str:
        stamp = format_timestamp(self.timestamp, self.timestamp_format)
        return f"[{stamp}] [{self.level.value}] {self.message}"

    def __str__(self) -> str:
        return self.format()


class Logger:
    """Thread-safe singleton holding an ordered, append-only log."""

    _instance: ClassVar[Optional["Logger"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()
    _instance_count: ClassVar[int] = 0

    def __init__(self, *, _key: object = None, clock: Callable[[], datetime] = now_local,
                 timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT):
        if _key is not _CONSTRUCTION_KEY:
            raise SingletonViolationError(
                "Logger must be obtained through Logger.get_instance()",
                class_name=type(self).__name__,
            )
        self._entries: list[LogEntry] = []
        self._entries_lock = threading.Lock()
        self._clock = clock
        self.timestamp_format = timestamp_format
        self._diagnostics = get_pattern_logger(__name__, "singleton")
        Logger._instance_count += 1
        self._diagnostics.info("Logger instance created", instance_count=Logger._instance_count)

    @classmethod
    def get_instance(cls) -> "Logger":
        """Return the process-wide Logger, creating it on first use."""
        instance = cls._instance
        if instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls(_key=_CONSTRUCTION_KEY)
                instance = cls._instance
        return instance

    @classmethod
    def instance_count(cls) -> int:
        """Number of Logger instances ever constructed (should be 1)."""
        return Logger._instance_count

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the current instance and its counter. Intended for tests."""
        with cls._instance_lock:
            cls._instance = None
            Logger._instance_count = 0

    def configure(self, clock: Optional[Callable[[], datetime]] = None,
                  timestamp_format: Optional[str] = None) -> None:
        """Adjust the clock or timestamp format on the live instance."""
        with self._entries_lock:
            if clock is not None:
                self._clock = clock
            if timestamp_format is not None:
                self.timestamp_format = timestamp_format

    def log(self, level: LogLevel, message: str) -> LogEntry:
        """
        Append an entry at the given level.

        The clock is read and the entry appended under one lock, so entries
        from concurrent callers are never lost, duplicated or interleaved.
        """
        with self._entries_lock:
            entry = LogEntry(
                timestamp=self._clock(),
                level=level,
                message=message,
                timestamp_format=self.timestamp_format,
            )
            self._entries.append(entry)
        self._diagnostics.debug("Log entry recorded", level=level.value, entry=message)
        return entry

    def log_info(self, message: str) -> LogEntry:
        return self.log(LogLevel.INFO, message)

    def log_error(self, message: str) -> LogEntry:
        return self.log(LogLevel.ERROR, message)

    def log_warning(self, message: str) -> LogEntry:
        return self.log(LogLevel.WARNING, message)

    @property
    def entries(self) -> list[LogEntry]:
        """Snapshot of all entries in insertion order."""
        with self._entries_lock:
            return list(self._entries)

    @property
    def messages(self) -> list[str]:
        """Formatted entries in insertion order."""
        return [entry.format() for entry in self.entries]

    def entries_at(self, level: LogLevel) -> list[LogEntry]:
        return [entry for entry in self.entries if entry.level is level]

    def __len__(self) -> int:
        with self._entries_lock:
            return len(self._entries)

    def display_logs(self, sink: Optional[OutputSink] = None) -> list[str]:
        """
        Render every entry between a header and footer.

        An empty log renders an explicit "No log entries found." line.

        Args:
            sink: Optional destination the rendered lines are emitted to

        Returns:
            The rendered lines
        """
        messages = self.messages
        lines = [LOG_HEADER]
        lines.extend(messages if messages else [NO_ENTRIES])
        lines.append(LOG_FOOTER)

        if sink is not None:
            sink.emit_lines(lines)
        return lines

    def clear_logs(self) -> None:
        with self._entries_lock:
            cleared = len(self._entries)
            self._entries.clear()
        self._diagnostics.info("All logs have been cleared", cleared=cleared)
