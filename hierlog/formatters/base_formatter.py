"""
Formatter contract

Handlers take any ``record -> str`` callable as their formatter. BaseFormatter
is the class form of that contract.
"""

from abc import ABC, abstractmethod
from hierlog.core.log_record import LogRecord


class BaseFormatter(ABC):
    """
    Turns a LogRecord into the line a handler writes.

    Implementations must not mutate the record (it is shared by every handler
    on the propagation path) and should not raise for a well-formed record.
    """

    @abstractmethod
    def format(self, record: LogRecord) -> str:
        """Render ``record`` without a trailing newline."""

    def __call__(self, record: LogRecord) -> str:
        return self.format(record)
