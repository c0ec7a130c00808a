"""Console handler"""

import sys
from typing import Optional, TextIO

from hierlog.core.log_level import Level
from hierlog.core.log_record import LogRecord
from hierlog.handlers.base_handler import BaseHandler, Formatter, RecordFilter


class ConsoleHandler(BaseHandler):
    """Write logs to the console, ERROR and above to stderr."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        error_stream: Optional[TextIO] = None,
        use_stderr: bool = True,
        include_args: bool = True,
        level: int = Level.NOTSET,
        formatter: Optional[Formatter] = None,
        log_filter: Optional[RecordFilter] = None,
    ):
        """
        Initialize console handler.

        Args:
            stream: Output stream (default: sys.stdout at write time)
            error_stream: Stream for ERROR and above (default: sys.stderr at write time)
            use_stderr: Route ERROR and above to error_stream
            include_args: Append the record's positional arguments
            level: Minimum level to handle
            formatter: Log formatter (default: BasicFormatter)
            log_filter: Record predicate
        """
        super().__init__(level=level, formatter=formatter, log_filter=log_filter)
        self.stream = stream
        self.error_stream = error_stream
        self.use_stderr = use_stderr
        self.include_args = include_args

    def _select_stream(self, record: LogRecord) -> TextIO:
        if self.use_stderr and record.level >= Level.ERROR:
            return self.error_stream if self.error_stream is not None else sys.stderr
        return self.stream if self.stream is not None else sys.stdout

    def emit(self, record: LogRecord) -> None:
        msg = self.format(record)
        if self.include_args and record.args:
            msg = " ".join([msg] + [str(arg) for arg in record.args])

        stream = self._select_stream(record)
        stream.write(msg + "\n")
        stream.flush()

    def flush(self) -> None:
        """Flush streams."""
        (self.stream or sys.stdout).flush()
        (self.error_stream or sys.stderr).flush()

    def __repr__(self) -> str:
        return f"ConsoleHandler(level={self.level}, formatter={self.formatter!r})"
