"""
Memory handler

Keeps records in a bounded in-process buffer. Mostly useful in tests and for
diagnostics endpoints that expose recent log activity.
"""

from __future__ import annotations

import json
import sys
import threading
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from hierlog.core.log_level import Level
from hierlog.core.log_record import LogRecord
from hierlog.handlers.base_handler import BaseHandler, Formatter, RecordFilter


class MemoryHandler(BaseHandler):
    """
    Store log records in memory.

    When the buffer grows past ``max_records`` either the oldest record is
    dropped (default) or, with ``auto_clear``, the whole buffer is emptied.
    A one-time warning is printed once ``warn_threshold`` records are held.

    Thread Safety:
        All public methods use an internal lock.

    Example:
        memory = MemoryHandler(max_records=100)
        get_logger("app").add_handler(memory)
        ...
        errors = memory.get_records_by_level(Level.ERROR)
    """

    def __init__(
        self,
        max_records: int = 1000,
        auto_clear: bool = False,
        warn_threshold: Optional[int] = None,
        on_memory_limit: Optional[Callable[[int, int], None]] = None,
        level: int = Level.NOTSET,
        formatter: Optional[Formatter] = None,
        log_filter: Optional[RecordFilter] = None,
    ):
        """
        Initialize memory handler.

        Args:
            max_records: Maximum number of records kept
            auto_clear: Empty the buffer instead of dropping the oldest record
            warn_threshold: Size that triggers the warning (default: 90% of max)
            on_memory_limit: Called with (current_size, max_records) when the
                limit is exceeded
            level: Minimum level to handle
            formatter: Used by get_formatted_logs (default: BasicFormatter)
            log_filter: Record predicate
        """
        if max_records <= 0:
            raise ValueError("max_records must be positive")

        super().__init__(level=level, formatter=formatter, log_filter=log_filter)
        self.max_records = max_records
        self.auto_clear = auto_clear
        self.warn_threshold = (
            warn_threshold if warn_threshold is not None else int(max_records * 0.9)
        )
        self.on_memory_limit = on_memory_limit

        self._records: List[LogRecord] = []
        self._warning_issued = False
        self._lock = threading.Lock()

    def emit(self, record: LogRecord) -> None:
        with self._lock:
            self._records.append(record)
            limit_size = self._manage_memory()

        if limit_size is not None and self.on_memory_limit is not None:
            self.on_memory_limit(limit_size, self.max_records)

    def _manage_memory(self) -> Optional[int]:
        """
        Enforce the size limit.

        Caller must hold lock. Returns the buffer size to report when the
        limit was exceeded.
        """
        size = len(self._records)
        if size > self.max_records:
            if self.auto_clear:
                self._records.clear()
            else:
                del self._records[0]
            self._warning_issued = False
            return len(self._records)

        if size >= self.warn_threshold and not self._warning_issued:
            print(
                f"Memory handler approaching limit: {size}/{self.max_records} records",
                file=sys.stderr,
            )
            self._warning_issued = True
        return None

    def get_records(self) -> List[LogRecord]:
        """Get a copy of all stored records."""
        with self._lock:
            return list(self._records)

    def get_records_by_level(self, level: int) -> List[LogRecord]:
        """Get records at or above a level."""
        return self.find_records(lambda record: record.level >= level)

    def get_records_by_logger(self, logger_name: str) -> List[LogRecord]:
        """Get records of a logger and its descendants."""
        prefix = logger_name + "."
        return self.find_records(
            lambda record: record.name == logger_name or record.name.startswith(prefix)
        )

    def get_records_by_time_range(self, start: datetime, end: datetime) -> List[LogRecord]:
        """Get records with start <= timestamp <= end."""
        return self.find_records(lambda record: start <= record.timestamp <= end)

    def find_records(self, predicate: Callable[[LogRecord], bool]) -> List[LogRecord]:
        """Get records matching a predicate."""
        return [record for record in self.get_records() if predicate(record)]

    def get_formatted_logs(self) -> List[str]:
        """Format every stored record."""
        return [self.format(record) for record in self.get_records()]

    def clear(self) -> None:
        """Drop all stored records."""
        with self._lock:
            self._records.clear()
            self._warning_issued = False

    def size(self) -> int:
        with self._lock:
            return len(self._records)

    def __len__(self) -> int:
        return self.size()

    def get_stats(self) -> Dict[str, Any]:
        """
        Get buffer statistics.

        Returns:
            Dictionary with size, max_records, oldest_record, newest_record
            and memory_usage_percent
        """
        records = self.get_records()
        size = len(records)
        return {
            "size": size,
            "max_records": self.max_records,
            "oldest_record": records[0].timestamp if records else None,
            "newest_record": records[-1].timestamp if records else None,
            "memory_usage_percent": round(size / self.max_records * 100),
        }

    def export_as_json(self) -> str:
        """Export metadata and all records as an indented JSON document."""
        records = self.get_records()
        document = {
            "metadata": {
                "exported_at": datetime.now().isoformat(),
                "total_records": len(records),
                "max_records": self.max_records,
                "config": {
                    "level": self.level,
                    "auto_clear": self.auto_clear,
                    "warn_threshold": self.warn_threshold,
                },
            },
            "records": [record.to_dict() for record in records],
        }
        return json.dumps(document, indent=2, default=str)

    def __repr__(self) -> str:
        return f"MemoryHandler(size={self.size()}, max_records={self.max_records})"
