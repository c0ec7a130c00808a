"""File handler"""

from pathlib import Path
from typing import Optional

from hierlog.core.log_level import Level
from hierlog.core.log_record import LogRecord
from hierlog.handlers.base_handler import BaseHandler, Formatter, RecordFilter


FILE_MODES = {"append": "a", "write": "w"}


class FileHandler(BaseHandler):
    """Write logs to file."""

    def __init__(
        self,
        filename: str,
        mode: str = "append",
        encoding: str = "utf-8",
        auto_flush: bool = True,
        level: int = Level.NOTSET,
        formatter: Optional[Formatter] = None,
        log_filter: Optional[RecordFilter] = None,
    ):
        """
        Initialize file handler.

        Args:
            filename: Path to log file (parent directories are created)
            mode: "append" or "write"
            encoding: File encoding (default: 'utf-8')
            auto_flush: Flush after every ERROR or CRITICAL record
            level: Minimum level to handle
            formatter: Log formatter (default: BasicFormatter)
            log_filter: Record predicate

        Raises:
            ValueError: If mode is not "append" or "write"
            OSError: If the file cannot be opened
        """
        if mode not in FILE_MODES:
            raise ValueError(f"Invalid file mode: {mode}")

        super().__init__(level=level, formatter=formatter, log_filter=log_filter)
        self.filepath = Path(filename)
        self.mode = mode
        self.encoding = encoding
        self.auto_flush = auto_flush
        self._file = None
        self._open()

    def _open(self):
        """Open log file."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.filepath, FILE_MODES[self.mode], encoding=self.encoding)

    def emit(self, record: LogRecord) -> None:
        if self._file:
            self._file.write(self.format(record) + "\n")
            if self.auto_flush and record.level >= Level.ERROR:
                self._file.flush()

    def flush(self):
        """Flush file buffer."""
        if self._file:
            self._file.flush()

    def close(self):
        """Close file."""
        if self._file:
            self._file.close()
            self._file = None

    def __repr__(self) -> str:
        return f"FileHandler(filename='{self.filepath}', mode={self.mode})"
