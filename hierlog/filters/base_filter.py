"""
Record filter contract

A filter is a ``record -> bool`` predicate passed to a handler as
``log_filter``. It runs after the logger's level check, so it only ever sees
records that were already built.
"""

from abc import ABC, abstractmethod
from hierlog.core.log_record import LogRecord


class BaseFilter(ABC):
    """
    Per-handler record predicate.

    Returning False skips the record for the handler the filter is attached
    to. Other handlers and propagation to parent loggers are unaffected.
    """

    @abstractmethod
    def should_log(self, record: LogRecord) -> bool:
        """Return True to let the handler emit ``record``."""

    def __call__(self, record: LogRecord) -> bool:
        return self.should_log(record)
