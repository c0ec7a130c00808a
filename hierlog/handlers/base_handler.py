"""
Base handler interface

A handler is anything callable with a LogRecord. BaseHandler adds the
optional minimum level, predicate filter and formatter that the built-in
handlers share.
"""

import sys
from abc import ABC, abstractmethod
from typing import Callable, Optional

from hierlog.core.log_level import Level, is_level_enabled
from hierlog.core.log_record import LogRecord
from hierlog.formatters.basic_formatter import BasicFormatter

Handler = Callable[[LogRecord], None]
Formatter = Callable[[LogRecord], str]
RecordFilter = Callable[[LogRecord], bool]


class BaseHandler(ABC):
    """
    Abstract base class for log handlers.

    ``handle()`` applies the level and filter checks and calls ``emit()``.
    Errors raised by ``emit()`` are reported through ``handle_error()`` and
    never reach the logger.
    """

    def __init__(
        self,
        level: int = Level.NOTSET,
        formatter: Optional[Formatter] = None,
        log_filter: Optional[RecordFilter] = None,
    ):
        """
        Initialize handler.

        Args:
            level: Minimum level to handle (NOTSET handles everything)
            formatter: Record formatter (default: BasicFormatter)
            log_filter: Predicate; records for which it returns False are skipped
        """
        self.level = level
        self.formatter = formatter or BasicFormatter()
        self.log_filter = log_filter

    def should_handle(self, record: LogRecord) -> bool:
        """Check the handler's own level and filter."""
        if self.level > Level.NOTSET and not is_level_enabled(self.level, record.level):
            return False
        if self.log_filter is not None and not self.log_filter(record):
            return False
        return True

    def format(self, record: LogRecord) -> str:
        return self.formatter(record)

    def handle(self, record: LogRecord) -> None:
        """Filter, then emit the record."""
        if not self.should_handle(record):
            return
        try:
            self.emit(record)
        except Exception as e:
            self.handle_error(e, record)

    @abstractmethod
    def emit(self, record: LogRecord) -> None:
        """
        Perform the actual output for a record that passed filtering.

        Args:
            record: The log record to output
        """
        pass

    def handle_error(self, error: Exception, record: LogRecord) -> None:
        print(f"{type(self).__name__} error: {error}", file=sys.stderr)

    def flush(self) -> None:
        """Flush buffered output (no-op by default)."""

    def close(self) -> None:
        """Release resources (no-op by default)."""

    def __call__(self, record: LogRecord) -> None:
        """Allow handlers to be used as plain callables."""
        self.handle(record)
