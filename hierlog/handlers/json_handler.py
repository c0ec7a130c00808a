"""JSON lines handler for structured logging"""

import sys
from typing import Dict, Optional, TextIO

from hierlog.core.log_level import Level
from hierlog.core.log_record import LogRecord
from hierlog.formatters.json_formatter import JSONFormatter
from hierlog.handlers.base_handler import BaseHandler, RecordFilter


class JSONHandler(BaseHandler):
    """Write one JSON object per record to a stream."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        pretty: bool = False,
        include_all: bool = False,
        field_mapping: Optional[Dict[str, str]] = None,
        level: int = Level.NOTSET,
        log_filter: Optional[RecordFilter] = None,
    ):
        """
        Initialize JSON handler.

        Args:
            stream: Output stream (default: sys.stdout at write time)
            pretty: Indent output
            include_all: Also emit ``level_num`` and ``args``
            field_mapping: Rename output keys
            level: Minimum level to handle
            log_filter: Record predicate
        """
        super().__init__(
            level=level,
            formatter=JSONFormatter(
                pretty=pretty, include_all=include_all, field_mapping=field_mapping
            ),
            log_filter=log_filter,
        )
        self.stream = stream

    def emit(self, record: LogRecord) -> None:
        stream = self.stream or sys.stdout
        stream.write(self.format(record) + "\n")

    def flush(self) -> None:
        (self.stream or sys.stdout).flush()
