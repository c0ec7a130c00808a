"""Stream handler with a custom write function"""

from typing import Callable, Optional

from hierlog.core.log_level import Level
from hierlog.core.log_record import LogRecord
from hierlog.handlers.base_handler import BaseHandler, Formatter, RecordFilter


class StreamHandler(BaseHandler):
    """
    Send formatted lines to an arbitrary write function.

    Example:
        buffer = io.StringIO()
        handler = StreamHandler(buffer.write)
    """

    def __init__(
        self,
        write: Callable[[str], object],
        on_error: Optional[Callable[[Exception], None]] = None,
        level: int = Level.NOTSET,
        formatter: Optional[Formatter] = None,
        log_filter: Optional[RecordFilter] = None,
    ):
        """
        Initialize stream handler.

        Args:
            write: Called with each formatted line (newline included)
            on_error: Receives errors raised while formatting or writing
                (default: report to stderr)
            level: Minimum level to handle
            formatter: Log formatter (default: BasicFormatter)
            log_filter: Record predicate
        """
        if not callable(write):
            raise TypeError("write must be callable")

        super().__init__(level=level, formatter=formatter, log_filter=log_filter)
        self.write = write
        self.on_error = on_error

    def emit(self, record: LogRecord) -> None:
        self.write(self.format(record) + "\n")

    def handle_error(self, error: Exception, record: LogRecord) -> None:
        if self.on_error is not None:
            self.on_error(error)
        else:
            super().handle_error(error, record)
