"""
Pattern-based filter using regular expressions

Filters log records based on message content matching
"""

import re
from typing import Union, Pattern
from hierlog.core.log_record import LogRecord
from hierlog.filters.base_filter import BaseFilter


class PatternFilter(BaseFilter):
    """
    Filter log records based on regex pattern matching.

    Can be configured to include or exclude matching messages.
    """

    def __init__(
        self,
        pattern: Union[str, Pattern],
        exclude: bool = False,
        case_sensitive: bool = True
    ):
        """
        Initialize pattern filter.

        Args:
            pattern: Regular expression pattern (string or compiled Pattern)
            exclude: If True, drop matching messages. If False, keep only matching messages.
            case_sensitive: Whether pattern matching is case-sensitive

        Example:
            # Drop health-check noise
            log_filter = PatternFilter(r"^GET /health", exclude=True)
        """
        if isinstance(pattern, str):
            flags = 0 if case_sensitive else re.IGNORECASE
            self.pattern = re.compile(pattern, flags)
        else:
            self.pattern = pattern

        self.exclude = exclude

    def should_log(self, record: LogRecord) -> bool:
        matches = self.pattern.search(record.message) is not None
        return not matches if self.exclude else matches

    def __repr__(self) -> str:
        """String representation."""
        mode = "exclude" if self.exclude else "include"
        return f"PatternFilter(pattern='{self.pattern.pattern}', mode={mode})"
