"""
Callback-based filter

Filters log records using custom callback functions
"""

import sys
from typing import Callable
from hierlog.core.log_record import LogRecord
from hierlog.filters.base_filter import BaseFilter


class CallbackFilter(BaseFilter):
    """
    Filter log records using a custom callback function.

    A callback that raises lets the record through.
    """

    def __init__(self, callback: Callable[[LogRecord], bool]):
        """
        Initialize callback filter.

        Args:
            callback: Function that takes a LogRecord and returns bool.
                     Should return True to keep the record, False to drop it.

        Example:
            # Only records carrying a request id
            def has_request_id(record):
                return bool(record.extra) and "request_id" in record.extra

            log_filter = CallbackFilter(has_request_id)

        Raises:
            TypeError: If callback is not callable
        """
        if not callable(callback):
            raise TypeError("callback must be callable")

        self.callback = callback

    def should_log(self, record: LogRecord) -> bool:
        try:
            return bool(self.callback(record))
        except Exception as e:
            print(f"Filter callback error: {e}", file=sys.stderr)
            return True

    def __repr__(self) -> str:
        """String representation."""
        callback_name = getattr(self.callback, '__name__', repr(self.callback))
        return f"CallbackFilter(callback={callback_name})"
