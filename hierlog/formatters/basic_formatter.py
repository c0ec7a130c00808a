"""
Minimal formatters

BasicFormatter matches the default format of Python's logging module.
"""

from hierlog.core.log_record import LogRecord
from hierlog.formatters.base_formatter import BaseFormatter


class BasicFormatter(BaseFormatter):
    """Format: "LEVEL:name:message"."""

    def format(self, record: LogRecord) -> str:
        return f"{record.level_name}:{record.name}:{record.message}"

    def __repr__(self) -> str:
        return "BasicFormatter()"


class SimpleFormatter(BaseFormatter):
    """Format: "LEVEL: message"."""

    def format(self, record: LogRecord) -> str:
        return f"{record.level_name}: {record.message}"

    def __repr__(self) -> str:
        return "SimpleFormatter()"


class MessageOnlyFormatter(BaseFormatter):
    """Format: "message"."""

    def format(self, record: LogRecord) -> str:
        return record.message

    def __repr__(self) -> str:
        return "MessageOnlyFormatter()"
