"""
Log filters module

Filters are predicates over LogRecord objects and can be passed to any
handler as ``log_filter``.
"""

from hierlog.filters.base_filter import BaseFilter
from hierlog.filters.level_filter import LevelFilter
from hierlog.filters.pattern_filter import PatternFilter
from hierlog.filters.callback_filter import CallbackFilter

__all__ = [
    "BaseFilter",
    "LevelFilter",
    "PatternFilter",
    "CallbackFilter",
]
