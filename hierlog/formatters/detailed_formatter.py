"""
Detailed formatter with configurable parts

Produces "timestamp - LEVEL - name - message" by default.
"""

import json
from datetime import datetime

from hierlog.core.log_record import LogRecord
from hierlog.formatters.base_formatter import BaseFormatter
from hierlog.formatters.json_formatter import safe_json_value


TIMESTAMP_FORMATS = ("iso", "locale", "short", "time")


def format_timestamp(timestamp: datetime, timestamp_format: str = "iso") -> str:
    """
    Render a timestamp in one of the supported styles.

    Args:
        timestamp: Timestamp to render
        timestamp_format: "iso", "locale", "short" or "time"
            (unknown values render as "iso")

    Returns:
        Formatted timestamp
    """
    if timestamp_format == "locale":
        return timestamp.strftime("%c")
    if timestamp_format == "short":
        return timestamp.strftime("%Y-%m-%d %H:%M:%S")
    if timestamp_format == "time":
        return timestamp.strftime("%H:%M:%S")
    return timestamp.isoformat(timespec="milliseconds")


class DetailedFormatter(BaseFormatter):
    """
    Format log records as separator-joined parts.

    Parts appear in this order: timestamp, level, logger name, message and
    (optionally) the extra fields as ``[key=value ...]``.
    """

    def __init__(
        self,
        include_timestamp: bool = True,
        timestamp_format: str = "iso",
        include_name: bool = True,
        include_level: bool = True,
        separator: str = " - ",
        include_extra: bool = False,
    ):
        """
        Initialize detailed formatter.

        Args:
            include_timestamp: Include timestamp in output
            timestamp_format: One of "iso", "locale", "short", "time"
            include_name: Include logger name in output
            include_level: Include level name in output
            separator: String placed between parts
            include_extra: Append extra fields

        Example:
            # "12:34:56 | INFO | connected"
            formatter = DetailedFormatter(
                timestamp_format="time",
                include_name=False,
                separator=" | ",
            )
        """
        self.include_timestamp = include_timestamp
        self.timestamp_format = timestamp_format
        self.include_name = include_name
        self.include_level = include_level
        self.separator = separator
        self.include_extra = include_extra

    def format(self, record: LogRecord) -> str:
        parts = []

        if self.include_timestamp:
            parts.append(format_timestamp(record.timestamp, self.timestamp_format))

        if self.include_level:
            parts.append(record.level_name)

        if self.include_name:
            parts.append(record.name)

        parts.append(record.message)

        if self.include_extra and record.extra:
            extra_str = " ".join(
                f"{key}={json.dumps(safe_json_value(value), default=str)}"
                for key, value in record.extra.items()
            )
            parts.append(f"[{extra_str}]")

        return self.separator.join(parts)

    def __repr__(self) -> str:
        return (
            f"DetailedFormatter(timestamp_format='{self.timestamp_format}', "
            f"separator='{self.separator}')"
        )
