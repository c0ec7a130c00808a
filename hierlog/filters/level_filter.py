"""
Level-based filter

Filters log records based on a level range
"""

from typing import Optional
from hierlog.core.log_record import LogRecord
from hierlog.filters.base_filter import BaseFilter


class LevelFilter(BaseFilter):
    """
    Filter log records based on level.

    Unlike a handler's minimum level, this filter can also cap the level,
    e.g. to send only DEBUG..INFO to a verbose sink.
    """

    def __init__(
        self,
        min_level: Optional[int] = None,
        max_level: Optional[int] = None
    ):
        """
        Initialize level filter.

        Args:
            min_level: Minimum level (inclusive). If None, no minimum.
            max_level: Maximum level (inclusive). If None, no maximum.

        Example:
            # Only DEBUG to INFO
            log_filter = LevelFilter(min_level=Level.DEBUG, max_level=Level.INFO)
        """
        self.min_level = min_level
        self.max_level = max_level

    def should_log(self, record: LogRecord) -> bool:
        if self.min_level is not None and record.level < self.min_level:
            return False

        if self.max_level is not None and record.level > self.max_level:
            return False

        return True

    def __repr__(self) -> str:
        """String representation."""
        return f"LevelFilter(min={self.min_level}, max={self.max_level})"
